"""
Filter expression tree: predicate leaves joined by AND / OR / NOT.

Consumers observe a tree only through :class:`Visitor` dispatch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from .predicate import FilterPredicate

R = TypeVar("R")
R_co = TypeVar("R_co", covariant=True)


class Visitor(Protocol[R_co]):
    """Double-dispatch target for every node kind of a filter tree."""

    def visit_predicate(self, predicate: FilterPredicate) -> R_co:
        ...

    def visit_and(self, expression: AndFilterExpression) -> R_co:
        ...

    def visit_or(self, expression: OrFilterExpression) -> R_co:
        ...

    def visit_not(self, expression: NotFilterExpression) -> R_co:
        ...


class FilterExpression(ABC):
    """Base class for filter tree nodes with logic operator support."""

    @abstractmethod
    def accept(self, visitor: Visitor[R]) -> R:
        ...

    def __and__(self, other: FilterExpression) -> AndFilterExpression:
        return AndFilterExpression(self, other)

    def __or__(self, other: FilterExpression) -> OrFilterExpression:
        return OrFilterExpression(self, other)

    def __invert__(self) -> NotFilterExpression:
        return NotFilterExpression(self)


class AndFilterExpression(FilterExpression):
    """Logical AND of two expressions."""

    def __init__(self, left: FilterExpression, right: FilterExpression) -> None:
        self.left = left
        self.right = right

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_and(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AndFilterExpression):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash(("and", self.left, self.right))

    def __str__(self) -> str:
        return f"({self.left} AND {self.right})"


class OrFilterExpression(FilterExpression):
    """Logical OR of two expressions."""

    def __init__(self, left: FilterExpression, right: FilterExpression) -> None:
        self.left = left
        self.right = right

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_or(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrFilterExpression):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash(("or", self.left, self.right))

    def __str__(self) -> str:
        return f"({self.left} OR {self.right})"


class NotFilterExpression(FilterExpression):
    """Logical NOT of one expression."""

    def __init__(self, negated: FilterExpression) -> None:
        self.negated = negated

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_not(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotFilterExpression):
            return NotImplemented
        return self.negated == other.negated

    def __hash__(self) -> int:
        return hash(("not", self.negated))

    def __str__(self) -> str:
        return f"NOT ({self.negated})"
