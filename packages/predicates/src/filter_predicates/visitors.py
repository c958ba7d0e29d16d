"""
Stock visitors over filter expression trees.

- :class:`InMemoryFilterVisitor` compiles a tree into one boolean test.
- :class:`NegationNormalizationVisitor` pushes NOT down to the leaves.
- :class:`PredicateExtractionVisitor` lists the leaf predicates.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .expression import (
    AndFilterExpression,
    FilterExpression,
    NotFilterExpression,
    OrFilterExpression,
)
from .operators import Operator
from .predicate import FilterPredicate

if TYPE_CHECKING:
    from .context import RuntimeContext
    from .operators import BooleanTest

logger = logging.getLogger(__name__)


class InMemoryFilterVisitor:
    """Build a single ``entity -> bool`` test for a whole tree."""

    def __init__(self, context: RuntimeContext) -> None:
        self._context = context

    def visit_predicate(self, predicate: FilterPredicate) -> BooleanTest:
        return predicate.apply(self._context)

    def visit_and(self, expression: AndFilterExpression) -> BooleanTest:
        left = expression.left.accept(self)
        right = expression.right.accept(self)
        return lambda entity: left(entity) and right(entity)

    def visit_or(self, expression: OrFilterExpression) -> BooleanTest:
        left = expression.left.accept(self)
        right = expression.right.accept(self)
        return lambda entity: left(entity) or right(entity)

    def visit_not(self, expression: NotFilterExpression) -> BooleanTest:
        inner = expression.negated.accept(self)
        return lambda entity: not inner(entity)


class NegationNormalizationVisitor:
    """
    Rewrite a tree so that NOT only sits directly over to-many predicates.

    ``NOT (a AND b)`` becomes ``NOT a OR NOT b`` (and dually for OR),
    double negations cancel, and a negated predicate is replaced by a
    clone carrying the inverse operator.  The input tree is left as is.

    Two cases keep the in-memory result unchanged:

    - A predicate whose path crosses a to-many relationship keeps its NOT
      node.  ``NOT any(v IN xs)`` is not ``any(v NOT xs)``.
    - A negated ordering predicate also matches a missing value, so
      ``NOT age GE 18`` becomes ``age LT 18 OR age ISNULL``.

    Raises:
        UnsupportedNegationError: If a NOT reaches a predicate whose
            operator has no inverse.
    """

    def visit_predicate(self, predicate: FilterPredicate) -> FilterExpression:
        return predicate

    def visit_and(self, expression: AndFilterExpression) -> FilterExpression:
        return AndFilterExpression(
            expression.left.accept(self), expression.right.accept(self)
        )

    def visit_or(self, expression: OrFilterExpression) -> FilterExpression:
        return OrFilterExpression(
            expression.left.accept(self), expression.right.accept(self)
        )

    def visit_not(self, expression: NotFilterExpression) -> FilterExpression:
        inner = expression.negated
        if isinstance(inner, NotFilterExpression):
            return inner.negated.accept(self)
        if isinstance(inner, AndFilterExpression):
            return OrFilterExpression(
                NotFilterExpression(inner.left), NotFilterExpression(inner.right)
            ).accept(self)
        if isinstance(inner, OrFilterExpression):
            return AndFilterExpression(
                NotFilterExpression(inner.left), NotFilterExpression(inner.right)
            ).accept(self)

        if not isinstance(inner, FilterPredicate):
            raise TypeError(f"Cannot negate {type(inner).__name__}")
        if inner.crosses_to_many():
            logger.debug("Kept NOT over to-many predicate %s", inner)
            return NotFilterExpression(inner)
        negated = inner.copy()
        negated.negate()
        logger.debug("Pushed NOT into %s", negated)
        if negated.operator.is_ordering:
            return OrFilterExpression(
                negated, FilterPredicate(inner.path.copy(), Operator.ISNULL)
            )
        return negated


class PredicateExtractionVisitor:
    """Collect every predicate of a tree, left to right."""

    def __init__(self) -> None:
        self.predicates: list[FilterPredicate] = []

    def visit_predicate(self, predicate: FilterPredicate) -> list[FilterPredicate]:
        self.predicates.append(predicate)
        return self.predicates

    def visit_and(self, expression: AndFilterExpression) -> list[FilterPredicate]:
        expression.left.accept(self)
        return expression.right.accept(self)

    def visit_or(self, expression: OrFilterExpression) -> list[FilterPredicate]:
        expression.left.accept(self)
        return expression.right.accept(self)

    def visit_not(self, expression: NotFilterExpression) -> list[FilterPredicate]:
        return expression.negated.accept(self)


def normalize(expression: FilterExpression) -> FilterExpression:
    """Shortcut for ``expression.accept(NegationNormalizationVisitor())``."""
    return expression.accept(NegationNormalizationVisitor())


def extract_predicates(expression: FilterExpression) -> list[FilterPredicate]:
    visitor = PredicateExtractionVisitor()
    expression.accept(visitor)
    return visitor.predicates
