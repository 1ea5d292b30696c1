"""ValidationReport — per-field failures gathered by the entity validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationReport:
    """
    Failure messages keyed by field, in the order the fields were checked.

    Reports are combined rather than mutated: the entity validator builds
    one report per failing field and folds them together with ``merge``.
    The errors mapping is copied on construction, so the caller's dict is
    never shared.
    """

    errors: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        copied = {name: list(messages) for name, messages in self.errors.items()}
        object.__setattr__(self, "errors", copied)

    @classmethod
    def for_field(cls, field_name: str, message: str) -> ValidationReport:
        return cls({field_name: [message]})

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def merge(self, other: ValidationReport) -> ValidationReport:
        """Messages of *other* are appended after this report's, per field."""
        merged = {name: list(messages) for name, messages in self.errors.items()}
        for field_name, messages in other.errors.items():
            merged.setdefault(field_name, []).extend(messages)
        return ValidationReport(merged)

    def first_error(self) -> tuple[str, str] | None:
        for field_name, messages in self.errors.items():
            if messages:
                return field_name, messages[0]
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": {name: list(messages) for name, messages in self.errors.items()},
        }

    def __bool__(self) -> bool:
        return self.is_valid
