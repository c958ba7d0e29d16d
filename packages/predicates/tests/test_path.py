"""Tests for traversal paths and path steps."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from filter_predicates import (
    FieldNotFoundError,
    InvalidPathError,
    PathStep,
    RelationshipTraversalError,
    RelationshipType,
    TraversalPath,
)

from models import Address, Author, Book, Post, User


def test_empty_path_is_rejected():
    with pytest.raises(InvalidPathError):
        TraversalPath([])


def test_accessors(author_name_path: TraversalPath):
    assert author_name_path.terminal_field == "name"
    assert author_name_path.terminal_field_dotted_path == "author.name"
    assert author_name_path.root_type is Book
    assert len(author_name_path) == 2
    assert [s.field_name for s in author_name_path] == ["author", "name"]


def test_crosses_to_many(posts_title_path, author_name_path):
    assert posts_title_path.crosses_to_many() is True
    assert author_name_path.crosses_to_many() is False
    assert TraversalPath([PathStep.of(User, "age")]).crosses_to_many() is False


def test_copy_is_equal_but_independent(author_name_path: TraversalPath):
    clone = author_name_path.copy()
    assert clone == author_name_path
    assert hash(clone) == hash(author_name_path)
    assert clone._steps is not author_name_path._steps


def test_path_steps_is_read_only_view(author_name_path: TraversalPath):
    steps = author_name_path.path_steps
    assert isinstance(steps, tuple)
    assert steps[0] == PathStep.of(Book, "author", RelationshipType.TO_ONE)


def test_path_step_is_frozen():
    step = PathStep.of(User, "age")
    with pytest.raises(PydanticValidationError):
        step.field_name = "name"  # type: ignore[misc]


def test_path_step_resolve_caches_cardinality(dictionary):
    step = PathStep.resolve(User, "posts", dictionary)
    assert step.cardinality is RelationshipType.TO_MANY
    assert PathStep.resolve(User, "age", dictionary).cardinality is RelationshipType.NONE


# -- from_dotted --------------------------------------------------------------


def test_from_dotted_resolves_each_hop(dictionary):
    path = TraversalPath.from_dotted(Book, "author.address.city", dictionary)
    assert [s.source_type for s in path] == [Book, Author, Address]
    assert [s.cardinality for s in path] == [
        RelationshipType.TO_ONE,
        RelationshipType.TO_ONE,
        RelationshipType.NONE,
    ]
    assert path.terminal_field_dotted_path == "author.address.city"


def test_from_dotted_to_many(dictionary):
    path = TraversalPath.from_dotted(User, "posts.title", dictionary)
    assert path.path_steps[1].source_type is Post
    assert path.crosses_to_many() is True


def test_from_dotted_cannot_traverse_attribute(dictionary):
    with pytest.raises(RelationshipTraversalError) as exc_info:
        TraversalPath.from_dotted(User, "name.length", dictionary)
    assert exc_info.value.field == "name"
    assert exc_info.value.full_path == "name.length"


def test_from_dotted_unknown_field_suggests(dictionary):
    with pytest.raises(FieldNotFoundError) as exc_info:
        TraversalPath.from_dotted(Book, "titel", dictionary)
    assert "title" in exc_info.value.suggestions


def test_from_dotted_empty(dictionary):
    with pytest.raises(InvalidPathError):
        TraversalPath.from_dotted(Book, "", dictionary)
