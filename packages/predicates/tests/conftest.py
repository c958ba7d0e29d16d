"""Shared fixtures for filter predicate tests."""

from __future__ import annotations

import pytest

from filter_predicates import (
    AttributeContext,
    MappingEntityDictionary,
    PathStep,
    RelationshipType,
    TraversalPath,
)

from models import Address, Author, Book, Post, User


@pytest.fixture
def dictionary() -> MappingEntityDictionary:
    return (
        MappingEntityDictionary()
        .bind(Address, attributes=["city"])
        .bind(
            Author,
            attributes=["name"],
            relationships={"address": (Address, RelationshipType.TO_ONE)},
        )
        .bind(
            Book,
            attributes=["title"],
            relationships={"author": (Author, RelationshipType.TO_ONE)},
        )
        .bind(Post, attributes=["title"])
        .bind(
            User,
            attributes=["name", "age", "active"],
            relationships={"posts": (Post, RelationshipType.TO_MANY)},
        )
    )


@pytest.fixture
def context() -> AttributeContext:
    return AttributeContext()


@pytest.fixture
def author_name_path() -> TraversalPath:
    return TraversalPath(
        [
            PathStep.of(Book, "author", RelationshipType.TO_ONE),
            PathStep.of(Author, "name"),
        ]
    )


@pytest.fixture
def posts_title_path() -> TraversalPath:
    return TraversalPath(
        [
            PathStep.of(User, "posts", RelationshipType.TO_MANY),
            PathStep.of(Post, "title"),
        ]
    )


@pytest.fixture
def alice() -> User:
    return User(
        name="Alice",
        age=28,
        posts=[Post(title="Hello World"), Post(title="Python tips")],
    )


@pytest.fixture
def bob() -> User:
    return User(name="Bob", age=15, active=False)
