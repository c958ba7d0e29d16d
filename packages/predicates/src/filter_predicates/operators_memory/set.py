"""Membership operators: in, not, ini, noti."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..evaluator import MemoryOperator
from ..operators import Operator

if TYPE_CHECKING:
    from collections.abc import Sequence


def _fold(value: Any) -> Any:
    return str(value).lower() if value is not None else None


class InOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.IN

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        return field_value in values


class NotInOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.NOT

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        return field_value not in values


class InInsensitiveOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.IN_INSENSITIVE

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        return _fold(field_value) in {_fold(v) for v in values}


class NotInInsensitiveOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.NOT_INSENSITIVE

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        return _fold(field_value) not in {_fold(v) for v in values}
