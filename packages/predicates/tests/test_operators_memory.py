"""Tests for the in-memory operator strategies."""

from __future__ import annotations

from typing import Any

import pytest

from filter_predicates.evaluator import MemoryOperatorRegistry
from filter_predicates.operators import Operator
from filter_predicates.operators_memory.null import (
    FalseOperator,
    IsNullOperator,
    NotNullOperator,
    TrueOperator,
)
from filter_predicates.operators_memory.set import (
    InInsensitiveOperator,
    InOperator,
    NotInInsensitiveOperator,
    NotInOperator,
)
from filter_predicates.operators_memory.standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
)
from filter_predicates.operators_memory.string import (
    InfixInsensitiveOperator,
    InfixOperator,
    PostfixInsensitiveOperator,
    PostfixOperator,
    PrefixInsensitiveOperator,
    PrefixOperator,
)


@pytest.mark.parametrize(
    ("strategy", "field_value", "values", "expected"),
    [
        (EqualOperator(), "a", ["b", "a"], True),
        (EqualOperator(), "c", ["b", "a"], False),
        (LessThanOperator(), 3, [5], True),
        (LessThanOperator(), None, [5], False),
        (LessEqualOperator(), 5, [5], True),
        (GreaterThanOperator(), 5, [5], False),
        (GreaterThanOperator(), None, [5], False),
        (GreaterEqualOperator(), 5, [5], True),
    ],
)
def test_standard(strategy: Any, field_value: Any, values: list[Any], expected: bool):
    assert strategy.evaluate(field_value, values) is expected


def test_membership():
    assert InOperator().evaluate(2, [1, 2]) is True
    assert NotInOperator().evaluate(2, [1, 2]) is False
    assert NotInOperator().evaluate(None, [1, 2]) is True
    assert InInsensitiveOperator().evaluate("ABC", ["abc"]) is True
    assert NotInInsensitiveOperator().evaluate("ABC", ["abc"]) is False
    assert InInsensitiveOperator().evaluate(None, ["abc"]) is False


def test_string_matching():
    assert PrefixOperator().evaluate("Hello", ["He"]) is True
    assert PrefixOperator().evaluate("Hello", ["he"]) is False
    assert PrefixInsensitiveOperator().evaluate("Hello", ["he"]) is True
    assert PostfixOperator().evaluate("Hello", ["llo"]) is True
    assert PostfixInsensitiveOperator().evaluate("Hello", ["LLO"]) is True
    assert InfixOperator().evaluate("Hello", ["ell"]) is True
    assert InfixInsensitiveOperator().evaluate("Hello", ["ELL"]) is True


@pytest.mark.parametrize(
    "strategy",
    [
        PrefixOperator(),
        PrefixInsensitiveOperator(),
        PostfixOperator(),
        PostfixInsensitiveOperator(),
        InfixOperator(),
        InfixInsensitiveOperator(),
    ],
)
def test_string_matching_null_field(strategy: Any):
    assert strategy.evaluate(None, ["x"]) is False


def test_null_and_literals():
    assert IsNullOperator().evaluate(None, []) is True
    assert NotNullOperator().evaluate(0, []) is True
    assert TrueOperator().evaluate(None, []) is True
    assert FalseOperator().evaluate("x", []) is False


def test_strategy_names():
    assert InfixInsensitiveOperator().name is Operator.INFIX_CASE_INSENSITIVE
    assert NotInOperator().name is Operator.NOT


def test_registry_register_and_unregister():
    registry = MemoryOperatorRegistry()
    assert registry.has(Operator.IN) is False
    registry.register(InOperator())
    assert registry.has(Operator.IN) is True
    assert registry.evaluate(Operator.IN, "a", ["a"]) is True

    registry.unregister(Operator.IN)
    assert registry.get(Operator.IN) is None
    with pytest.raises(ValueError, match="Unsupported operator"):
        registry.evaluate(Operator.IN, "a", ["a"])
