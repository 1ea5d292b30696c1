"""EntityValidator — applies per-field validations to a whole entity."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import FieldResolutionError, ValidationFailedError
from .report import ValidationReport

if TYPE_CHECKING:
    from .base import Validation

logger = logging.getLogger("predicate_validation.entity")

E = TypeVar("E")

_MISSING = object()


class ValidationMode(str, Enum):
    """How an entity validator reacts to a failing field."""

    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


class EntityValidator:
    """
    Maps field names to validations and evaluates them against an entity.

    Fields are checked in registration order. Mapping entities are read by
    key, anything else by attribute.

    Usage::

        validator = EntityValidator(
            {
                "name": not_null() & length_between(2, 12),
                "email": not_null() & contains_char("@"),
            },
            mode=ValidationMode.FAIL_FAST,
        )
        report = validator.validate(user)
        validator.ensure_valid(user)  # raises ValidationFailedError
    """

    def __init__(
        self,
        rules: Mapping[str, Validation[Any]] | None = None,
        *,
        mode: ValidationMode | str = ValidationMode.COLLECT_ALL,
    ) -> None:
        self._rules: dict[str, Validation[Any]] = {}
        self.mode = ValidationMode(mode)
        for field_name, validation in (rules or {}).items():
            self.add(field_name, validation)

    @property
    def fields(self) -> list[str]:
        return list(self._rules)

    def add(self, field_name: str, validation: Validation[Any]) -> EntityValidator:
        """
        Register *validation* for *field_name*.

        A second registration for the same field is ANDed after the
        existing rule.
        """
        existing = self._rules.get(field_name)
        self._rules[field_name] = (
            validation if existing is None else existing.and_(validation)
        )
        return self

    def validate(self, entity: Any) -> ValidationReport:
        """
        Evaluate every rule and return the collected report.

        Raises:
            FieldResolutionError: If a rule names a field the entity lacks.
        """
        report = ValidationReport()
        for field_name, validation in self._rules.items():
            result = validation.evaluate(_resolve(entity, field_name))
            if result.is_valid:
                continue
            message = result.message if result.message is not None else ""
            logger.debug("Field %s is invalid: %s", field_name, message)
            report = report.merge(ValidationReport.for_field(field_name, message))
            if self.mode is ValidationMode.FAIL_FAST:
                break

        first = report.first_error()
        if first is not None:
            logger.info(
                "%s failed validation on %d field(s), first: %s %s",
                type(entity).__name__,
                len(report.errors),
                *first,
            )
        return report

    def ensure_valid(self, entity: E) -> E:
        """Return *entity* unchanged, or raise ValidationFailedError."""
        report = self.validate(entity)
        if not report.is_valid:
            raise ValidationFailedError(report.errors)
        return entity


# -- field resolution --------------------------------------------------------


def _resolve(entity: Any, field_name: str) -> Any:
    if isinstance(entity, Mapping):
        value = entity.get(field_name, _MISSING)
        if value is not _MISSING:
            return value
    else:
        try:
            return getattr(entity, field_name)
        except AttributeError:
            # Declared on the class: the failure came from inside the accessor.
            if hasattr(type(entity), field_name):
                raise
    raise FieldResolutionError(
        field_name, type(entity).__name__, _available_fields(entity)
    )


def _available_fields(entity: Any) -> list[str]:
    if isinstance(entity, Mapping):
        return [str(key) for key in entity]
    model_fields = getattr(type(entity), "model_fields", None)
    if isinstance(model_fields, Mapping):
        return list(model_fields)
    if dataclasses.is_dataclass(entity):
        return [f.name for f in dataclasses.fields(entity)]
    if hasattr(entity, "__dict__"):
        return list(vars(entity))
    return [name for name in dir(entity) if not name.startswith("_")]
