"""
Fluent builder for constructing filter expression trees.

Example::

    expression = (
        FilterBuilder(User, dictionary)
        .where("age", "ge", 18)
        .where("posts.title", "infixi", "python")
        .build()
    )
    # → user.age GE [18] AND user.posts.title INFIX_CASE_INSENSITIVE [python]

    expression = (
        FilterBuilder(User, dictionary)
        .or_group()
            .where("role", "in", "admin", "superuser")
            .where("name", "prefix", "root")
        .end_group()
        .where("age", "notnull")
        .build()
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .expression import AndFilterExpression, NotFilterExpression, OrFilterExpression
from .operators import Operator
from .path import TraversalPath
from .predicate import FilterPredicate

if TYPE_CHECKING:
    from .expression import FilterExpression
    from .metadata import EntityDictionary


class FilterBuilder:
    """
    Fluent builder for composing filter trees rooted at one entity type.

    Conditions added at the same level are combined with AND by default.
    Use ``or_group()`` / ``and_group()`` / ``not_group()`` for explicit
    grouping, and ``end_group()`` to close the current group.
    """

    def __init__(self, root_type: type[Any], dictionary: EntityDictionary) -> None:
        self._root_type = root_type
        self._dictionary = dictionary
        self._expressions: list[FilterExpression] = []
        self._stack: list[tuple[str, list[FilterExpression]]] = []
        # stack items: (group_operator, expressions_list)

    # -- leaf conditions -----------------------------------------------------

    def where(
        self,
        field_path: str,
        op: Operator | str,
        *values: Any,
    ) -> FilterBuilder:
        """Add ``field_path op values`` to the current group."""
        operator = op if isinstance(op, Operator) else Operator.from_notation(op)
        path = TraversalPath.from_dotted(self._root_type, field_path, self._dictionary)
        self._current_list().append(FilterPredicate(path, operator, values))
        return self

    def add(self, expression: FilterExpression) -> FilterBuilder:
        """Add an already-constructed expression to the current group."""
        self._current_list().append(expression)
        return self

    # -- grouping ------------------------------------------------------------

    def and_group(self) -> FilterBuilder:
        """Open a new AND group.  Close with ``end_group()``."""
        self._stack.append(("and", []))
        return self

    def or_group(self) -> FilterBuilder:
        """Open a new OR group.  Close with ``end_group()``."""
        self._stack.append(("or", []))
        return self

    def not_group(self) -> FilterBuilder:
        """Open a new NOT group (single child).  Close with ``end_group()``."""
        self._stack.append(("not", []))
        return self

    def end_group(self) -> FilterBuilder:
        """Close the current group and add it to the parent."""
        if not self._stack:
            raise ValueError("No open group to close")
        group_op, expressions = self._stack.pop()
        self._current_list().append(_combine(group_op, expressions))
        return self

    # -- build ---------------------------------------------------------------

    def build(self) -> FilterExpression:
        """
        Finalise and return the composed expression.

        Raises:
            ValueError: If groups are still open or no conditions were added.
        """
        if self._stack:
            raise ValueError(
                f"{len(self._stack)} group(s) still open, "
                f"call end_group() before build()"
            )
        if not self._expressions:
            raise ValueError("No conditions added to builder")
        return _combine("and", self._expressions)

    def reset(self) -> FilterBuilder:
        """Clear all conditions and return ``self`` for reuse."""
        self._expressions.clear()
        self._stack.clear()
        return self

    # -- internals -----------------------------------------------------------

    def _current_list(self) -> list[FilterExpression]:
        if self._stack:
            return self._stack[-1][1]
        return self._expressions


def _combine(op: str, expressions: list[FilterExpression]) -> FilterExpression:
    """Fold a list of expressions left to right with the given operator."""
    if not expressions:
        raise ValueError("Cannot create an empty group")
    if op == "not":
        if len(expressions) != 1:
            raise ValueError("NOT group must contain exactly one condition")
        return NotFilterExpression(expressions[0])

    node: type[AndFilterExpression] | type[OrFilterExpression]
    if op == "and":
        node = AndFilterExpression
    elif op == "or":
        node = OrFilterExpression
    else:
        raise ValueError(f"Unknown group operator: {op}")

    result = expressions[0]
    for expression in expressions[1:]:
        result = node(result, expression)
    return result
