"""
Leaf node of a filter expression tree.

A :class:`FilterPredicate` binds a :class:`TraversalPath` to an
:class:`Operator` and a value list.  Query generators read its field
path, join alias and named parameters; in-memory evaluation goes
through :meth:`FilterPredicate.apply`.
"""

from __future__ import annotations

import hashlib
import logging
import re
from typing import TYPE_CHECKING, Any, TypeVar

from .expression import FilterExpression
from .path import PathStep, TraversalPath

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .context import RuntimeContext
    from .expression import Visitor
    from .metadata import EntityDictionary
    from .operators import BooleanTest, Operator

logger = logging.getLogger(__name__)

R = TypeVar("R")

UNDERSCORE = "_"
PERIOD = "."
_NON_IDENTIFIER = re.compile(r"\W")


class FilterPredicate(FilterExpression):
    """
    ``path operator values`` constraint, e.g. ``book.author.name IN [a, b]``.

    Path and values are fixed at construction.  The operator is the only
    mutable part and changes only through :meth:`negate`.  Equality is
    structural.
    """

    def __init__(
        self,
        path: TraversalPath | PathStep,
        operator: Operator,
        values: Iterable[Any] = (),
    ) -> None:
        self._path = TraversalPath([path]) if isinstance(path, PathStep) else path
        self._operator = operator
        self._values: list[Any] = list(values)

    @classmethod
    def copy_of(cls, other: FilterPredicate) -> FilterPredicate:
        """Independent clone: new step list, new value list, same operator."""
        return cls(other.path.copy(), other.operator, list(other.values))

    def copy(self) -> FilterPredicate:
        return FilterPredicate.copy_of(self)

    @staticmethod
    def to_many_in_path(dictionary: EntityDictionary, path: TraversalPath) -> bool:
        """True if *dictionary* reports a to-many relationship on any step."""
        return any(
            dictionary.resolve_cardinality(
                step.source_type, step.field_name
            ).is_to_many
            for step in path.path_steps
        )

    @staticmethod
    def type_alias(entity_type: type[Any]) -> str:
        """Qualified type name usable as an identifier in generated queries."""
        qualified = f"{entity_type.__module__}.{entity_type.__qualname__}"
        return _NON_IDENTIFIER.sub(UNDERSCORE, qualified)

    # -- state ---------------------------------------------------------------

    @property
    def path(self) -> TraversalPath:
        return self._path

    @property
    def operator(self) -> Operator:
        return self._operator

    @property
    def values(self) -> tuple[Any, ...]:
        return tuple(self._values)

    # -- derived accessors ---------------------------------------------------

    @property
    def field(self) -> str:
        return self._path.terminal_field

    @property
    def field_path(self) -> str:
        return self._path.terminal_field_dotted_path

    @property
    def entity_type(self) -> type[Any]:
        return self._path.root_type

    def crosses_to_many(self) -> bool:
        return self._path.crosses_to_many()

    @property
    def parameter_name_prefix(self) -> str:
        """
        Unique parameter base name, e.g. ``author_name_1a2b3c4d5e6f7a8b``.

        Two predicates over the same field path get different names
        unless they are structurally equal.
        """
        return (
            self.field_path.replace(PERIOD, UNDERSCORE)
            + UNDERSCORE
            + self.structural_digest()
        )

    @property
    def named_parameters(self) -> list[tuple[str, Any]]:
        base = self.parameter_name_prefix + UNDERSCORE
        return [(f"{base}{idx}", value) for idx, value in enumerate(self._values)]

    @property
    def alias(self) -> str:
        """
        Alias of the collection that owns the terminal field.

        For a one-step path this is the root type alias.  Otherwise it is
        the alias of the relationship just before the terminal field
        (``Book.author.name`` → ``<Book alias>_author``), so predicates
        reaching through the same relationship share one join.
        """
        steps = self._path.path_steps
        if len(steps) == 1:
            return self.type_alias(steps[0].source_type)
        previous = steps[-2]
        return self.type_alias(previous.source_type) + UNDERSCORE + previous.field_name

    @property
    def is_matching_operator(self) -> bool:
        return self._operator.is_matching

    def escaped_string_value(self, special: str, escape: str) -> str:
        """
        First value as a string, each *special* prefixed with *escape*.

        Only meaningful for matching operators with exactly one value.
        """
        if not self._values:
            raise ValueError(f"Predicate '{self}' has no value to escape")
        return str(self._values[0]).replace(special, escape + special)

    # -- behaviour -----------------------------------------------------------

    def negate(self) -> None:
        """
        Replace the operator with its inverse, in place.

        Raises:
            UnsupportedNegationError: Left unchanged from the operator; the
                predicate keeps its current operator.
        """
        negated = self._operator.negate()
        logger.debug("Negated %s: %s -> %s", self.field_path, self._operator, negated)
        self._operator = negated

    def apply(self, context: RuntimeContext) -> BooleanTest:
        """Contextualize the operator into a test over entities."""
        return self._operator.contextualize(self.field_path, self._values, context)

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_predicate(self)

    # -- identity ------------------------------------------------------------

    def _structural_key(self) -> tuple[Any, ...]:
        steps = tuple(
            (self.type_alias(s.source_type), s.field_name, s.cardinality.value)
            for s in self._path.path_steps
        )
        return steps, self._operator.value, tuple(self._values)

    def _canonical_key(self) -> bytes:
        # Values compare by repr, so 1, 1.0 and True stay distinct.
        return repr(self._structural_key()).encode("utf-8")

    def structural_digest(self) -> str:
        """Short hex digest of path, operator and values."""
        return hashlib.blake2b(self._canonical_key(), digest_size=8).hexdigest()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterPredicate):
            return NotImplemented
        return (
            self._path == other._path
            and self._canonical_key() == other._canonical_key()
        )

    def __hash__(self) -> int:
        return int(self.structural_digest(), 16)

    def __str__(self) -> str:
        root = self._path.root_type.__name__
        formatted = root[:1].lower() + root[1:]
        for step in self._path.path_steps:
            formatted += PERIOD + step.field_name
        rendered = ", ".join(str(v) for v in self._values)
        return f"{formatted} {self._operator.name} [{rendered}]"

    def __repr__(self) -> str:
        return (
            f"FilterPredicate({self._path!r}, {self._operator.name}, "
            f"{self._values!r})"
        )
