"""
Traversal paths: ordered hops from a root entity type to a terminal field.

A path such as ``User -> posts -> title`` is stored as one
:class:`PathStep` per hop.  Cardinality is resolved once, when the step
is built, and never changes afterwards.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidPathError, RelationshipTraversalError
from .metadata import RelationshipType

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .metadata import EntityDictionary

logger = logging.getLogger(__name__)

PERIOD = "."


class PathStep(BaseModel):
    """One hop of a traversal path: a field on a source type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source_type: type[Any]
    field_name: str
    cardinality: RelationshipType = RelationshipType.NONE

    @classmethod
    def of(
        cls,
        source_type: type[Any],
        field_name: str,
        cardinality: RelationshipType = RelationshipType.NONE,
    ) -> PathStep:
        return cls(
            source_type=source_type, field_name=field_name, cardinality=cardinality
        )

    @classmethod
    def resolve(
        cls,
        source_type: type[Any],
        field_name: str,
        dictionary: EntityDictionary,
    ) -> PathStep:
        """Build a step whose cardinality is looked up in *dictionary*."""
        return cls.of(
            source_type,
            field_name,
            dictionary.resolve_cardinality(source_type, field_name),
        )

    def __repr__(self) -> str:
        return (
            f"PathStep({self.source_type.__name__}.{self.field_name}, "
            f"{self.cardinality.value})"
        )


class TraversalPath:
    """Non-empty, ordered sequence of :class:`PathStep`."""

    def __init__(self, steps: Iterable[PathStep]) -> None:
        self._steps: list[PathStep] = list(steps)
        if not self._steps:
            raise InvalidPathError()

    @classmethod
    def from_dotted(
        cls,
        root_type: type[Any],
        dotted_path: str,
        dictionary: EntityDictionary,
    ) -> TraversalPath:
        """
        Resolve ``"author.address.city"`` against *root_type*.

        Every segment but the last must be a relationship; the type it
        targets anchors the next segment.

        Raises:
            InvalidPathError: If *dotted_path* is empty.
            RelationshipTraversalError: If a non-terminal segment is a plain
                attribute.
            FieldNotFoundError: If the dictionary does not know a segment.
        """
        parts = [p for p in dotted_path.split(PERIOD) if p]
        if not parts:
            raise InvalidPathError(f"Empty field path for {root_type.__name__}")

        steps: list[PathStep] = []
        current: type[Any] | None = root_type
        for idx, part in enumerate(parts):
            if current is None:
                previous = steps[-1]
                raise RelationshipTraversalError(
                    previous.field_name,
                    previous.source_type.__name__,
                    full_path=dotted_path,
                )
            step = PathStep.resolve(current, part, dictionary)
            steps.append(step)
            if idx < len(parts) - 1:
                current = (
                    dictionary.resolve_target_type(current, part)
                    if step.cardinality.is_relationship
                    else None
                )

        logger.debug(
            "Resolved path %s.%s into %d step(s)",
            root_type.__name__,
            dotted_path,
            len(steps),
        )
        return cls(steps)

    # -- accessors -----------------------------------------------------------

    @property
    def path_steps(self) -> tuple[PathStep, ...]:
        return tuple(self._steps)

    @property
    def terminal_field(self) -> str:
        return self._steps[-1].field_name

    @property
    def terminal_field_dotted_path(self) -> str:
        return PERIOD.join(step.field_name for step in self._steps)

    @property
    def root_type(self) -> type[Any]:
        return self._steps[0].source_type

    def crosses_to_many(self) -> bool:
        return any(step.cardinality.is_to_many for step in self._steps)

    def copy(self) -> TraversalPath:
        """Return a path with its own step list."""
        return TraversalPath(list(self._steps))

    # -- dunder --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[PathStep]:
        return iter(tuple(self._steps))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraversalPath):
            return NotImplemented
        return self._steps == other._steps

    def __hash__(self) -> int:
        return hash(tuple(self._steps))

    def __repr__(self) -> str:
        return (
            f"TraversalPath({self.root_type.__name__}."
            f"{self.terminal_field_dotted_path})"
        )
