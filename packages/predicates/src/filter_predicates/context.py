"""
Runtime context used to contextualize operators against live objects.

A context knows two things: how to read a dotted field path off an
entity, and which evaluation strategy implements each operator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .operators_memory import build_default_registry

if TYPE_CHECKING:
    from .evaluator import MemoryOperatorRegistry


@runtime_checkable
class RuntimeContext(Protocol):
    """Capability handed to :meth:`Operator.contextualize`."""

    @property
    def registry(self) -> MemoryOperatorRegistry:
        ...

    def resolve(self, entity: Any, field_path: str) -> list[Any]:
        """
        Return the candidate values *field_path* reaches from *entity*.

        Paths through to-many collections fan out into several candidates;
        an empty list means the path reached no value at all.
        """
        ...


class AttributeContext:
    """
    Default context over plain objects, mappings and sequences.

    Supports nested attribute access (``address.city``) and implicit
    list traversal (``posts.title`` where ``posts`` is a list yields the
    title of every post).
    """

    def __init__(self, registry: MemoryOperatorRegistry | None = None) -> None:
        self._registry = registry if registry is not None else build_default_registry()

    @property
    def registry(self) -> MemoryOperatorRegistry:
        return self._registry

    def resolve(self, entity: Any, field_path: str) -> list[Any]:
        current: list[Any] = [entity]
        for part in field_path.split("."):
            current = [self._read(obj, part) for obj in _flatten(current)]
        return list(_flatten(current))

    @staticmethod
    def _read(obj: Any, part: str) -> Any:
        if obj is None:
            return None
        if isinstance(obj, dict):
            return obj.get(part)
        return getattr(obj, part, None)


def _flatten(values: list[Any]) -> list[Any]:
    flat: list[Any] = []
    for value in values:
        if isinstance(value, list | tuple | set | frozenset):
            flat.extend(value)
        else:
            flat.append(value)
    return flat
