"""
In-memory operator evaluation strategy.

Provides the MemoryOperator protocol and a registry that maps
:class:`Operator` → evaluation strategy.  :meth:`Operator.contextualize`
looks strategies up here through the runtime context.

New strategies are added by subclassing MemoryOperator and
registering via ``register()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .operators import Operator


class MemoryOperator(ABC):
    """
    Strategy interface for in-memory operator evaluation.

    Each operator is an isolated class with a single ``evaluate`` method.
    """

    @property
    @abstractmethod
    def name(self) -> Operator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def evaluate(self, field_value: Any, values: Sequence[Any]) -> bool:
        """
        Evaluate the operator against concrete values.

        Args:
            field_value: One value resolved from the candidate entity.
            values: The predicate's value list, already arity-checked.

        Returns:
            True if the condition is satisfied.
        """
        ...


class MemoryOperatorRegistry:
    """
    Registry of MemoryOperator instances keyed by Operator.

    Usage::

        registry = MemoryOperatorRegistry()
        registry.register(InOperator())

        result = registry.evaluate(Operator.IN, actual, ["a", "b"])
    """

    def __init__(self) -> None:
        self._operators: dict[Operator, MemoryOperator] = {}

    # -- registration --------------------------------------------------------

    def register(self, operator: MemoryOperator) -> None:
        """Register an operator strategy instance."""
        self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        """Register multiple operator strategy instances at once."""
        for op in operators:
            self.register(op)

    def unregister(self, name: Operator) -> None:
        """Remove an operator from the registry."""
        self._operators.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: Operator) -> MemoryOperator | None:
        """Return the registered operator or ``None``."""
        return self._operators.get(name)

    def has(self, name: Operator) -> bool:
        return name in self._operators

    @property
    def supported_operators(self) -> set[Operator]:
        return set(self._operators.keys())

    # -- evaluation shortcut -------------------------------------------------

    def evaluate(
        self,
        name: Operator,
        field_value: Any,
        values: Sequence[Any],
    ) -> bool:
        """
        Look up the operator and evaluate.

        Raises:
            ValueError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise ValueError(f"Unsupported operator for in-memory evaluation: {name}")
        return op.evaluate(field_value, values)
