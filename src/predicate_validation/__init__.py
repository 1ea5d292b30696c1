"""Composable predicate validations with short-circuiting AND / OR."""

from __future__ import annotations

from .base import AndValidation, OrValidation, Validation, all_of, any_of
from .decorators import validate_arguments
from .entity import EntityValidator, ValidationMode
from .exceptions import (
    FieldResolutionError,
    PredicateValidationError,
    ValidationFailedError,
)
from .helpers import (
    at_least,
    at_most,
    between,
    contains,
    contains_char,
    greater_than,
    length_between,
    lower_than,
    matches,
    max_length,
    min_length,
    not_blank,
    not_null,
    one_of,
)
from .predicate import PredicateValidation, from_predicate
from .pydantic import conforms_to
from .report import ValidationReport
from .result import ValidationResult

__all__ = [
    # Core types
    "Validation",
    "PredicateValidation",
    "AndValidation",
    "OrValidation",
    "ValidationResult",
    # Construction
    "from_predicate",
    "all_of",
    "any_of",
    "conforms_to",
    # Helpers
    "at_least",
    "at_most",
    "between",
    "contains",
    "contains_char",
    "greater_than",
    "length_between",
    "lower_than",
    "matches",
    "max_length",
    "min_length",
    "not_blank",
    "not_null",
    "one_of",
    # Boundary adapters
    "EntityValidator",
    "ValidationMode",
    "ValidationReport",
    "validate_arguments",
    # Exceptions
    "PredicateValidationError",
    "ValidationFailedError",
    "FieldResolutionError",
]
