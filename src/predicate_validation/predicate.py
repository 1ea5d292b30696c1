"""Leaf validation built from a boolean predicate and a failure message."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .base import Validation
from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T", contravariant=True)


class PredicateValidation(Validation[T]):
    """
    The atomic check: passes when ``predicate(value)`` holds, otherwise
    fails with ``message`` verbatim.

    The predicate must not mutate the value it receives.
    """

    def __init__(self, predicate: Callable[[T], bool], message: str) -> None:
        self._predicate = predicate
        self._message = message

    @property
    def predicate(self) -> Callable[[T], bool]:
        return self._predicate

    @property
    def message(self) -> str:
        return self._message

    def evaluate(self, value: T) -> ValidationResult:
        if self._predicate(value):
            return ValidationResult.valid()
        return ValidationResult.invalid(self._message)

    def to_dict(self) -> dict[str, Any]:
        return {"op": "predicate", "message": self.message}

    def __repr__(self) -> str:
        return f"PredicateValidation({self.message!r})"


def from_predicate(predicate: Callable[[T], bool], message: str) -> Validation[T]:
    """Build a leaf validation. An empty *message* is allowed."""
    return PredicateValidation(predicate, message)
