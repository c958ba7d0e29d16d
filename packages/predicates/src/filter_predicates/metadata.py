"""
Entity metadata port.

The path model never inspects entity classes itself.  Relationship
cardinality and target types come from an :class:`EntityDictionary`,
which persistence backends implement (see ``adapters.sqlalchemy``).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .exceptions import FieldNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class RelationshipType(str, Enum):
    """Multiplicity of the field a path step names."""

    NONE = "none"
    TO_ONE = "to_one"
    TO_MANY = "to_many"

    @property
    def is_relationship(self) -> bool:
        return self is not RelationshipType.NONE

    @property
    def is_to_many(self) -> bool:
        return self is RelationshipType.TO_MANY


@runtime_checkable
class EntityDictionary(Protocol):
    """Protocol for entity metadata lookups used by path construction."""

    def resolve_cardinality(
        self, entity_type: type[Any], field_name: str
    ) -> RelationshipType:
        """Return the relationship cardinality of *field_name* on *entity_type*."""
        ...

    def resolve_target_type(
        self, entity_type: type[Any], field_name: str
    ) -> type[Any] | None:
        """Return the type a relationship points at, or ``None`` for attributes."""
        ...


class MappingEntityDictionary:
    """
    In-memory entity dictionary populated by explicit bindings.

    Usage::

        dictionary = MappingEntityDictionary()
        dictionary.bind(Post, attributes=["title"])
        dictionary.bind(
            User,
            attributes=["name", "age"],
            relationships={"posts": (Post, RelationshipType.TO_MANY)},
        )
    """

    def __init__(self) -> None:
        self._attributes: dict[type[Any], set[str]] = {}
        self._relationships: dict[
            type[Any], dict[str, tuple[type[Any], RelationshipType]]
        ] = {}

    def bind(
        self,
        entity_type: type[Any],
        *,
        attributes: Iterable[str] = (),
        relationships: Mapping[str, tuple[type[Any], RelationshipType]] | None = None,
    ) -> MappingEntityDictionary:
        """Register the attributes and relationships of *entity_type*."""
        self._attributes.setdefault(entity_type, set()).update(attributes)
        rels = self._relationships.setdefault(entity_type, {})
        for name, (target, cardinality) in (relationships or {}).items():
            if not cardinality.is_relationship:
                raise ValueError(
                    f"Relationship '{name}' on {entity_type.__name__} "
                    "needs a TO_ONE or TO_MANY cardinality"
                )
            rels[name] = (target, cardinality)
        return self

    def field_names(self, entity_type: type[Any]) -> list[str]:
        return sorted(
            self._attributes.get(entity_type, set())
            | set(self._relationships.get(entity_type, {}))
        )

    def resolve_cardinality(
        self, entity_type: type[Any], field_name: str
    ) -> RelationshipType:
        rel = self._relationships.get(entity_type, {}).get(field_name)
        if rel is not None:
            return rel[1]
        if field_name in self._attributes.get(entity_type, set()):
            return RelationshipType.NONE
        raise FieldNotFoundError(
            field_name, entity_type.__name__, self.field_names(entity_type)
        )

    def resolve_target_type(
        self, entity_type: type[Any], field_name: str
    ) -> type[Any] | None:
        rel = self._relationships.get(entity_type, {}).get(field_name)
        if rel is not None:
            return rel[0]
        if field_name in self._attributes.get(entity_type, set()):
            return None
        raise FieldNotFoundError(
            field_name, entity_type.__name__, self.field_names(entity_type)
        )
