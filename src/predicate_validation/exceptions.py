"""
Exceptions raised by the boundary adapters.

The combinator itself never raises; these only surface where a caller
asks for fail-fast behaviour or names a field that does not exist.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class PredicateValidationError(Exception):
    """Root exception for predicate-validation."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationFailedError(PredicateValidationError):
    """Raised when a value or entity failed validation.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(_render(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "errors": self.errors,
        }


class FieldResolutionError(PredicateValidationError):
    """
    A rule names a field the entity does not expose.

    Example error message::

        Field 'emial' not found on 'User'. Did you mean: email?
    """

    def __init__(
        self,
        field: str,
        entity_type: str,
        available: list[str],
    ) -> None:
        self.field = field
        self.entity_type = entity_type
        self.available = available
        self.suggestions = get_close_matches(field, available, n=3, cutoff=0.6)

        message = f"Field '{field}' not found on '{entity_type}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.field,
            "entity_type": self.entity_type,
            "suggestions": self.suggestions,
        }


def _render(errors: dict[str, list[str]]) -> str:
    if not errors:
        return "Validation failed"
    return "; ".join(
        f"{name} {message}" for name, messages in errors.items() for message in messages
    )
