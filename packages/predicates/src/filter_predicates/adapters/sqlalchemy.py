"""
Entity dictionary backed by SQLAlchemy mapper inspection.

Relationships with ``uselist=True`` are ``TO_MANY``, other relationships
are ``TO_ONE``, and mapped column attributes are plain fields.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Mapper

from ..exceptions import FieldNotFoundError
from ..metadata import RelationshipType

logger = logging.getLogger(__name__)


class SQLAlchemyEntityDictionary:
    """Resolve cardinality and target types from declarative models."""

    def __init__(self) -> None:
        self._mappers: dict[type[Any], Mapper[Any]] = {}

    def _mapper(self, model: type[Any]) -> Mapper[Any]:
        mapper = self._mappers.get(model)
        if mapper is None:
            mapper = sa_inspect(model)
            self._mappers[model] = mapper
        return mapper

    def field_names(self, model: type[Any]) -> list[str]:
        mapper = self._mapper(model)
        return sorted(set(mapper.column_attrs.keys()) | set(mapper.relationships.keys()))

    def resolve_cardinality(
        self, entity_type: type[Any], field_name: str
    ) -> RelationshipType:
        mapper = self._mapper(entity_type)
        rel = mapper.relationships.get(field_name)
        if rel is not None:
            cardinality = (
                RelationshipType.TO_MANY if rel.uselist else RelationshipType.TO_ONE
            )
            logger.debug(
                "Relationship %s.%s is %s",
                entity_type.__name__,
                field_name,
                cardinality.value,
            )
            return cardinality
        if field_name in mapper.column_attrs:
            return RelationshipType.NONE
        raise FieldNotFoundError(
            field_name, entity_type.__name__, self.field_names(entity_type)
        )

    def resolve_target_type(
        self, entity_type: type[Any], field_name: str
    ) -> type[Any] | None:
        mapper = self._mapper(entity_type)
        rel = mapper.relationships.get(field_name)
        if rel is not None:
            target: type[Any] = rel.mapper.class_
            return target
        if field_name in mapper.column_attrs:
            return None
        raise FieldNotFoundError(
            field_name, entity_type.__name__, self.field_names(entity_type)
        )
