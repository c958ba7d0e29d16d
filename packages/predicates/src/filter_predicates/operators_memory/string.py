"""String matching operators: prefix, postfix, infix and their ``i`` variants."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..evaluator import MemoryOperator
from ..operators import Operator

if TYPE_CHECKING:
    from collections.abc import Sequence


class PrefixOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.PREFIX

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        if field_value is None:
            return False
        return str(field_value).startswith(str(values[0]))


class PrefixInsensitiveOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.PREFIX_CASE_INSENSITIVE

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        if field_value is None:
            return False
        return str(field_value).lower().startswith(str(values[0]).lower())


class PostfixOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.POSTFIX

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        if field_value is None:
            return False
        return str(field_value).endswith(str(values[0]))


class PostfixInsensitiveOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.POSTFIX_CASE_INSENSITIVE

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        if field_value is None:
            return False
        return str(field_value).lower().endswith(str(values[0]).lower())


class InfixOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.INFIX

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        if field_value is None:
            return False
        return str(values[0]) in str(field_value)


class InfixInsensitiveOperator(MemoryOperator):
    @property
    def name(self) -> Operator:
        return Operator.INFIX_CASE_INSENSITIVE

    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        if field_value is None:
            return False
        return str(values[0]).lower() in str(field_value).lower()
