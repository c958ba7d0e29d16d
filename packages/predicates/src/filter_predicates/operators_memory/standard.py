"""Equality and ordering operators: eq, lt, le, gt, ge."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..evaluator import MemoryOperator
from ..operators import Operator

if TYPE_CHECKING:
    from collections.abc import Sequence


class EqualOperator(MemoryOperator):
    """Satisfied when the field equals any of the given values."""

    @property
    def name(self) -> Operator:
        return Operator.EQ

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        return any(field_value == v for v in values)


class LessThanOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.LT

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        if field_value is None:
            return False
        return bool(field_value < values[0])


class LessEqualOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.LE

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        if field_value is None:
            return False
        return bool(field_value <= values[0])


class GreaterThanOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.GT

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        if field_value is None:
            return False
        return bool(field_value > values[0])


class GreaterEqualOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.GE

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        if field_value is None:
            return False
        return bool(field_value >= values[0])
