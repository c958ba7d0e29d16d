"""
In-memory operator implementations.

Provides concrete MemoryOperator subclasses for each Operator and a
factory function to create registries.

Usage::

    from filter_predicates.operators_memory import build_default_registry

    registry = build_default_registry()
    result = registry.evaluate(Operator.IN, actual, ["a", "b"])
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .null import (
    FalseOperator,
    IsNullOperator,
    NotNullOperator,
    TrueOperator,
)
from .set import (
    InInsensitiveOperator,
    InOperator,
    NotInInsensitiveOperator,
    NotInOperator,
)
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
)
from .string import (
    InfixInsensitiveOperator,
    InfixOperator,
    PostfixInsensitiveOperator,
    PostfixOperator,
    PrefixInsensitiveOperator,
    PrefixOperator,
)


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry with all built-in operators.

    Returns a fresh instance on every call, so callers may register or
    unregister strategies without affecting each other.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate(Operator.IN, "active", ["active"])
        True
    """
    registry = MemoryOperatorRegistry()
    registry.register_all(
        # Equality / ordering
        EqualOperator(),
        LessThanOperator(),
        LessEqualOperator(),
        GreaterThanOperator(),
        GreaterEqualOperator(),
        # Membership
        InOperator(),
        NotInOperator(),
        InInsensitiveOperator(),
        NotInInsensitiveOperator(),
        # String matching
        PrefixOperator(),
        PrefixInsensitiveOperator(),
        PostfixOperator(),
        PostfixInsensitiveOperator(),
        InfixOperator(),
        InfixInsensitiveOperator(),
        # Null checks / literals
        IsNullOperator(),
        NotNullOperator(),
        TrueOperator(),
        FalseOperator(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "MemoryOperatorRegistry",
]
