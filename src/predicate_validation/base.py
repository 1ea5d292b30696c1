"""Validation base class with short-circuiting AND / OR composites."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import reduce
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from .result import ValidationResult

T = TypeVar("T", contravariant=True)


class Validation(ABC, Generic[T]):
    """
    A check over a single value that yields a
    :class:`~predicate_validation.result.ValidationResult`.

    Validations compose with ``and_`` / ``or_`` (or ``&`` / ``|``). The
    resulting tree is immutable and keeps the operands in the order the
    caller wrote them: the first short-circuiting operand decides which
    message is reported.
    """

    @abstractmethod
    def evaluate(self, value: T) -> ValidationResult:
        """Evaluate *value*. Never raises for a well-formed value."""
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Describe the validation tree as plain data."""
        ...

    def and_(self, other: Validation[T]) -> AndValidation[T]:
        """Fail with this result if it fails, otherwise return *other*'s."""
        return AndValidation(self, other)

    def or_(self, other: Validation[T]) -> OrValidation[T]:
        """Pass with this result if it passes, otherwise return *other*'s."""
        return OrValidation(self, other)

    def __and__(self, other: Validation[T]) -> AndValidation[T]:
        return self.and_(other)

    def __or__(self, other: Validation[T]) -> OrValidation[T]:
        return self.or_(other)


class AndValidation(Validation[T]):
    """Logical AND of two validations; stops at the first failure."""

    def __init__(self, left: Validation[T], right: Validation[T]) -> None:
        self._left = left
        self._right = right

    @property
    def left(self) -> Validation[T]:
        return self._left

    @property
    def right(self) -> Validation[T]:
        return self._right

    def evaluate(self, value: T) -> ValidationResult:
        result = self._left.evaluate(value)
        if not result.is_valid:
            return result
        return self._right.evaluate(value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "and",
            "conditions": [self.left.to_dict(), self.right.to_dict()],
        }

    def __repr__(self) -> str:
        return f"({self.left!r} & {self.right!r})"


class OrValidation(Validation[T]):
    """Logical OR of two validations; stops at the first success."""

    def __init__(self, left: Validation[T], right: Validation[T]) -> None:
        self._left = left
        self._right = right

    @property
    def left(self) -> Validation[T]:
        return self._left

    @property
    def right(self) -> Validation[T]:
        return self._right

    def evaluate(self, value: T) -> ValidationResult:
        result = self._left.evaluate(value)
        if result.is_valid:
            return result
        return self._right.evaluate(value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "or",
            "conditions": [self.left.to_dict(), self.right.to_dict()],
        }

    def __repr__(self) -> str:
        return f"({self.left!r} | {self.right!r})"


# -- folding helpers ---------------------------------------------------------


def all_of(*validations: Validation[T]) -> Validation[T]:
    """
    Chain *validations* left to right with AND.

    ``all_of(a, b, c)`` is ``(a & b) & c``; a single validation is
    returned as is.

    Raises:
        ValueError: If no validation is given.
    """
    if not validations:
        raise ValueError("all_of() needs at least one validation")
    return reduce(lambda acc, nxt: acc.and_(nxt), validations)


def any_of(*validations: Validation[T]) -> Validation[T]:
    """
    Chain *validations* left to right with OR.

    Raises:
        ValueError: If no validation is given.
    """
    if not validations:
        raise ValueError("any_of() needs at least one validation")
    return reduce(lambda acc, nxt: acc.or_(nxt), validations)
