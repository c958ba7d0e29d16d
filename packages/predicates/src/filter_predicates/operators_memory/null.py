"""Null checks and boolean literals: isnull, notnull, true, false."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..evaluator import MemoryOperator
from ..operators import Operator

if TYPE_CHECKING:
    from collections.abc import Sequence


class IsNullOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.ISNULL

    def evaluate(self, field_value: Any, _values: Sequence[Any]) -> bool:
        return field_value is None


class NotNullOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.NOTNULL

    def evaluate(self, field_value: Any, _values: Sequence[Any]) -> bool:
        return field_value is not None


class TrueOperator(MemoryOperator):
    """Literal true; the field value is ignored."""

    @property
    def name(self) -> Operator:
        return Operator.TRUE

    def evaluate(self, _field_value: Any, _values: Sequence[Any]) -> bool:
        return True


class FalseOperator(MemoryOperator):
    """Literal false; the field value is ignored."""

    @property
    def name(self) -> Operator:
        return Operator.FALSE

    def evaluate(self, _field_value: Any, _values: Sequence[Any]) -> bool:
        return False
