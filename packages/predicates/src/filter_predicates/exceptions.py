"""
Filter predicate exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``PredicateError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class PredicateError(Exception):
    """Base exception for all filter predicate errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidPathError(PredicateError):
    """A traversal path was constructed without any steps."""

    def __init__(self, message: str = "A traversal path needs at least one step") -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_PATH",
            "message": self.message,
        }


class OperatorArityError(PredicateError):
    """The value list does not satisfy the operator's arity rule."""

    def __init__(self, operator: str, expected: str, actual: int) -> None:
        self.operator = operator
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Operator '{operator}' expects {expected} value(s), got {actual}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_ARITY",
            "operator": self.operator,
            "expected": self.expected,
            "actual": self.actual,
        }


class UnsupportedNegationError(PredicateError):
    """The operator has no single-operator logical inverse."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"Operator '{operator}' cannot be negated")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_NEGATION",
            "operator": self.operator,
        }


class OperatorNotFoundError(PredicateError):
    """
    Unknown operator notation.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unknown operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators)[:10])}..."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class FieldNotFoundError(PredicateError):
    """
    Unknown field on an entity type, with helpful suggestions.

    Example error message::

        Invalid field 'titel' on 'Book'.
        Did you mean one of these?
          • title

        Available fields: author, id, title
    """

    def __init__(
        self,
        invalid_field: str,
        model_name: str,
        available_fields: list[str],
        full_path: str | None = None,
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.model_name = model_name
        self.available_fields = available_fields
        self.full_path = full_path or invalid_field

        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=5, cutoff=cutoff
        )

        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [f"Invalid field '{self.invalid_field}' on '{self.model_name}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")

        sorted_fields = sorted(self.available_fields)
        preview = ", ".join(sorted_fields[:15])
        if len(sorted_fields) > 15:
            preview += ", ..."
        lines.append(f"Available fields: {preview}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "model": self.model_name,
            "full_path": self.full_path,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class RelationshipTraversalError(PredicateError):
    """
    Error when a dotted path traverses a field that is not a relationship.

    Happens when a path like ``title.something`` is used, but
    ``title`` is a plain attribute, not a relationship to another type.
    """

    def __init__(
        self,
        field: str,
        model_name: str,
        full_path: str | None = None,
    ) -> None:
        self.field = field
        self.model_name = model_name
        self.full_path = full_path or field

        super().__init__(
            f"Cannot traverse '{field}' on '{model_name}': "
            f"it is not a relationship. Full path: '{self.full_path}'"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RELATIONSHIP_TRAVERSAL_ERROR",
            "field": self.field,
            "model": self.model_name,
            "full_path": self.full_path,
        }
