"""ValidationResult — the outcome of evaluating one validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    """Pass/fail outcome with an optional failure message.

    Usage::

        result = ValidationResult.valid()
        result = ValidationResult.invalid("must not be null.")
    """

    is_valid: bool
    message: str | None = None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def valid(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, message: str) -> ValidationResult:
        return cls(is_valid=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.is_valid, "message": self.message}

    def __bool__(self) -> bool:
        return self.is_valid
