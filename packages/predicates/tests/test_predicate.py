"""Tests for FilterPredicate naming, aliasing, negation and evaluation."""

from __future__ import annotations

import pytest

from filter_predicates import (
    AttributeContext,
    FilterPredicate,
    Operator,
    OperatorArityError,
    PathStep,
    RelationshipType,
    TraversalPath,
    UnsupportedNegationError,
)

from models import Author, Book, Post, User


@pytest.fixture
def age_path() -> TraversalPath:
    return TraversalPath([PathStep.of(User, "age")])


# -- construction ------------------------------------------------------------


def test_single_step_convenience():
    predicate = FilterPredicate(PathStep.of(User, "age"), Operator.GE, [18])
    assert predicate.path == TraversalPath([PathStep.of(User, "age")])
    assert predicate.values == (18,)


def test_values_default_to_empty(age_path):
    assert FilterPredicate(age_path, Operator.ISNULL).values == ()


def test_structural_equality(author_name_path):
    a = FilterPredicate(author_name_path, Operator.IN, ["x"])
    b = FilterPredicate(author_name_path.copy(), Operator.IN, ["x"])
    assert a == b
    assert hash(a) == hash(b)
    assert a != FilterPredicate(author_name_path, Operator.IN, ["y"])
    assert a != FilterPredicate(author_name_path, Operator.NOT, ["x"])


def test_equal_predicates_hash_equal(age_path):
    ints = FilterPredicate(age_path, Operator.IN, [1])
    floats = FilterPredicate(age_path.copy(), Operator.IN, [1.0])
    assert (ints == floats) is (hash(ints) == hash(floats))
    assert ints != floats
    assert len({ints, FilterPredicate(age_path.copy(), Operator.IN, [1])}) == 1


def test_structural_digest_width(age_path):
    assert len(FilterPredicate(age_path, Operator.GE, [18]).structural_digest()) == 16


# -- derived accessors -------------------------------------------------------


def test_field_accessors(author_name_path):
    predicate = FilterPredicate(author_name_path, Operator.IN, ["Tolkien"])
    assert predicate.field == "name"
    assert predicate.field_path == "author.name"
    assert predicate.entity_type is Book


def test_parameter_prefix_is_deterministic(author_name_path):
    predicate = FilterPredicate(author_name_path, Operator.IN, ["Tolkien"])
    prefix = predicate.parameter_name_prefix
    assert prefix.startswith("author_name_")
    assert predicate.parameter_name_prefix == prefix


def test_parameter_prefix_differs_for_same_field_path(author_name_path):
    first = FilterPredicate(author_name_path, Operator.IN, ["Tolkien"])
    second = FilterPredicate(author_name_path.copy(), Operator.INFIX, ["Lewis"])
    assert first.field_path == second.field_path
    assert first.parameter_name_prefix != second.parameter_name_prefix


def test_named_parameters_preserve_order(author_name_path):
    predicate = FilterPredicate(author_name_path, Operator.IN, ["a", "b", "c"])
    prefix = predicate.parameter_name_prefix
    assert predicate.named_parameters == [
        (f"{prefix}_0", "a"),
        (f"{prefix}_1", "b"),
        (f"{prefix}_2", "c"),
    ]


def test_alias_single_step():
    predicate = FilterPredicate(PathStep.of(Book, "title"), Operator.IN, ["x"])
    assert predicate.alias == FilterPredicate.type_alias(Book)
    assert predicate.alias.endswith("models_Book")


def test_alias_names_the_relationship_before_the_terminal_field(author_name_path):
    predicate = FilterPredicate(author_name_path, Operator.IN, ["x"])
    assert predicate.alias == FilterPredicate.type_alias(Book) + "_author"
    assert FilterPredicate.type_alias(Author) not in predicate.alias


def test_alias_is_shared_by_siblings_on_the_same_hop():
    title = FilterPredicate(
        TraversalPath(
            [
                PathStep.of(User, "posts", RelationshipType.TO_MANY),
                PathStep.of(Post, "title"),
            ]
        ),
        Operator.INFIX,
        ["a"],
    )
    body = FilterPredicate(
        TraversalPath(
            [
                PathStep.of(User, "posts", RelationshipType.TO_MANY),
                PathStep.of(Post, "body"),
            ]
        ),
        Operator.ISNULL,
    )
    assert title.alias == body.alias


def test_type_alias_is_an_identifier():
    assert FilterPredicate.type_alias(User).isidentifier()


def test_escaped_string_value(posts_title_path):
    predicate = FilterPredicate(posts_title_path, Operator.INFIX, ["50%_off"])
    assert predicate.escaped_string_value("%", "\\") == "50\\%_off"


def test_escaped_string_value_without_value(age_path):
    with pytest.raises(ValueError, match="no value"):
        FilterPredicate(age_path, Operator.ISNULL).escaped_string_value("%", "\\")


def test_str_presentation(posts_title_path):
    predicate = FilterPredicate(posts_title_path, Operator.INFIX, ["hello"])
    assert str(predicate) == "user.posts.title INFIX [hello]"


# -- negation ----------------------------------------------------------------


def test_negate_replaces_operator(age_path):
    predicate = FilterPredicate(age_path, Operator.GE, [18])
    predicate.negate()
    assert predicate.operator is Operator.LT
    assert predicate.values == (18,)


@pytest.mark.parametrize(
    "op", [Operator.EQ, Operator.INFIX, Operator.PREFIX_CASE_INSENSITIVE]
)
def test_negate_unsupported_leaves_operator(age_path, op: Operator):
    predicate = FilterPredicate(age_path, op, ["x"])
    with pytest.raises(UnsupportedNegationError):
        predicate.negate()
    assert predicate.operator is op


def test_copy_is_independent(age_path):
    original = FilterPredicate(age_path, Operator.IN, [1, 2])
    clone = FilterPredicate.copy_of(original)
    assert clone == original

    clone.negate()
    assert clone.operator is Operator.NOT
    assert original.operator is Operator.IN
    assert original.values == (1, 2)
    assert clone.path is not original.path


def test_to_many_scenario(posts_title_path):
    predicate = FilterPredicate(posts_title_path, Operator.INFIX, ["hello"])
    assert predicate.is_matching_operator is True
    assert predicate.field_path == "posts.title"
    assert predicate.crosses_to_many() is True
    with pytest.raises(UnsupportedNegationError):
        predicate.negate()
    assert predicate.operator is Operator.INFIX


def test_to_many_in_path(dictionary, posts_title_path, author_name_path):
    assert FilterPredicate.to_many_in_path(dictionary, posts_title_path) is True
    assert FilterPredicate.to_many_in_path(dictionary, author_name_path) is False


# -- evaluation --------------------------------------------------------------


def test_apply(context: AttributeContext, alice: User, bob: User, age_path):
    test = FilterPredicate(age_path, Operator.GE, [18]).apply(context)
    assert test(alice) is True
    assert test(bob) is False


def test_apply_checks_arity(context: AttributeContext, age_path):
    with pytest.raises(OperatorArityError):
        FilterPredicate(age_path, Operator.ISNULL, [None]).apply(context)


def test_accept_dispatches_to_visit_predicate(age_path):
    class Recorder:
        def visit_predicate(self, predicate):
            return ("leaf", predicate.field)

    predicate = FilterPredicate(age_path, Operator.NOTNULL)
    assert predicate.accept(Recorder()) == ("leaf", "age")
