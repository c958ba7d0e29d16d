"""
Closed operator taxonomy for filter predicates.

Each :class:`Operator` carries an arity rule, a contextualization rule
(delegated to the runtime context's strategy registry) and a negation
entry.  The arity and negation tables must cover every member; this is
checked when the module is imported.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

from .exceptions import (
    OperatorArityError,
    OperatorNotFoundError,
    UnsupportedNegationError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .context import RuntimeContext

logger = logging.getLogger(__name__)

BooleanTest = Callable[[Any], bool]


class Arity(str, Enum):
    """How many values an operator accepts."""

    NONE = "exactly 0"
    ONE = "exactly 1"
    MANY = "1 or more"

    def accepts(self, count: int) -> bool:
        if self is Arity.NONE:
            return count == 0
        if self is Arity.ONE:
            return count == 1
        return count >= 1


class Operator(str, Enum):
    """Supported filter operators, valued by their dialect notation."""

    EQ = "eq"

    # Membership
    IN = "in"
    NOT = "not"
    IN_INSENSITIVE = "ini"
    NOT_INSENSITIVE = "noti"

    # String matching
    PREFIX = "prefix"
    PREFIX_CASE_INSENSITIVE = "prefixi"
    POSTFIX = "postfix"
    POSTFIX_CASE_INSENSITIVE = "postfixi"
    INFIX = "infix"
    INFIX_CASE_INSENSITIVE = "infixi"

    # Null checks
    ISNULL = "isnull"
    NOTNULL = "notnull"

    # Ordering
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"

    # Boolean literals
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_notation(cls, notation: str) -> Operator:
        """
        Parse dialect notation such as ``"prefixi"`` or ``"GE"``.

        Raises:
            OperatorNotFoundError: With fuzzy suggestions when unknown.
        """
        key = notation.strip().lower()
        try:
            return cls(key)
        except ValueError:
            raise OperatorNotFoundError(key, [m.value for m in cls]) from None

    @property
    def arity(self) -> Arity:
        return _ARITY[self]

    @property
    def is_matching(self) -> bool:
        return self in _MATCHING

    @property
    def is_case_insensitive(self) -> bool:
        return self in _CASE_INSENSITIVE

    @property
    def is_ordering(self) -> bool:
        return self in _ORDERING

    @property
    def is_negatable(self) -> bool:
        return self in _NEGATIONS

    def negate(self) -> Operator:
        """
        Return the logical inverse of this operator.

        Raises:
            UnsupportedNegationError: For equality, string matching and any
                other operator without a single-operator inverse.
        """
        try:
            return _NEGATIONS[self]
        except KeyError:
            raise UnsupportedNegationError(self.name) from None

    def validate_arity(self, values: Sequence[Any]) -> None:
        if not self.arity.accepts(len(values)):
            raise OperatorArityError(self.name, self.arity.value, len(values))

    def contextualize(
        self,
        field_path: str,
        values: Sequence[Any],
        context: RuntimeContext,
    ) -> BooleanTest:
        """
        Turn this operator into a boolean test over entities.

        The test resolves *field_path* on each candidate through *context*
        and is satisfied when any resolved value matches; a path that
        resolves to nothing is evaluated as ``None``.

        Raises:
            OperatorArityError: If *values* violates :attr:`arity`.
            ValueError: If *context* has no strategy for this operator.
        """
        self.validate_arity(values)
        strategy = context.registry.get(self)
        if strategy is None:
            raise ValueError(f"Unsupported operator for in-memory evaluation: {self}")
        frozen_values = tuple(values)

        def test(entity: Any) -> bool:
            candidates = context.resolve(entity, field_path) or [None]
            return any(strategy.evaluate(c, frozen_values) for c in candidates)

        return test

    def __str__(self) -> str:
        return self.name


_ARITY: dict[Operator, Arity] = {
    Operator.EQ: Arity.MANY,
    Operator.IN: Arity.MANY,
    Operator.NOT: Arity.MANY,
    Operator.IN_INSENSITIVE: Arity.MANY,
    Operator.NOT_INSENSITIVE: Arity.MANY,
    Operator.PREFIX: Arity.ONE,
    Operator.PREFIX_CASE_INSENSITIVE: Arity.ONE,
    Operator.POSTFIX: Arity.ONE,
    Operator.POSTFIX_CASE_INSENSITIVE: Arity.ONE,
    Operator.INFIX: Arity.ONE,
    Operator.INFIX_CASE_INSENSITIVE: Arity.ONE,
    Operator.ISNULL: Arity.NONE,
    Operator.NOTNULL: Arity.NONE,
    Operator.LT: Arity.ONE,
    Operator.LE: Arity.ONE,
    Operator.GT: Arity.ONE,
    Operator.GE: Arity.ONE,
    Operator.TRUE: Arity.NONE,
    Operator.FALSE: Arity.NONE,
}

_NEGATIONS: dict[Operator, Operator] = {
    Operator.GE: Operator.LT,
    Operator.GT: Operator.LE,
    Operator.LE: Operator.GT,
    Operator.LT: Operator.GE,
    Operator.IN: Operator.NOT,
    Operator.NOT: Operator.IN,
    Operator.TRUE: Operator.FALSE,
    Operator.FALSE: Operator.TRUE,
    Operator.ISNULL: Operator.NOTNULL,
    Operator.NOTNULL: Operator.ISNULL,
}

# Operators deliberately left without an inverse.
_NOT_NEGATABLE: frozenset[Operator] = frozenset(
    {
        Operator.EQ,
        Operator.IN_INSENSITIVE,
        Operator.NOT_INSENSITIVE,
        Operator.PREFIX,
        Operator.PREFIX_CASE_INSENSITIVE,
        Operator.POSTFIX,
        Operator.POSTFIX_CASE_INSENSITIVE,
        Operator.INFIX,
        Operator.INFIX_CASE_INSENSITIVE,
    }
)

_MATCHING: frozenset[Operator] = frozenset(
    {
        Operator.PREFIX,
        Operator.PREFIX_CASE_INSENSITIVE,
        Operator.POSTFIX,
        Operator.POSTFIX_CASE_INSENSITIVE,
        Operator.INFIX,
        Operator.INFIX_CASE_INSENSITIVE,
    }
)

_ORDERING: frozenset[Operator] = frozenset(
    {Operator.LT, Operator.LE, Operator.GT, Operator.GE}
)

_CASE_INSENSITIVE: frozenset[Operator] = frozenset(
    {
        Operator.IN_INSENSITIVE,
        Operator.NOT_INSENSITIVE,
        Operator.PREFIX_CASE_INSENSITIVE,
        Operator.POSTFIX_CASE_INSENSITIVE,
        Operator.INFIX_CASE_INSENSITIVE,
    }
)


def _check_tables() -> None:
    members = set(Operator)
    if set(_ARITY) != members:
        raise TypeError(f"Arity table misses: {sorted(members - set(_ARITY))}")
    covered = set(_NEGATIONS) | _NOT_NEGATABLE
    if covered != members or set(_NEGATIONS) & _NOT_NEGATABLE:
        raise TypeError(
            f"Negation table is not exhaustive: {sorted(members ^ covered)}"
        )


_check_tables()
