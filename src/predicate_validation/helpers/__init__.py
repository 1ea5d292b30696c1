"""
Named helper validations.

Every helper is a plain function returning a fresh
:class:`~predicate_validation.base.Validation`. Range helpers are
compositions of two leaf checks, never new primitive types.
"""

from __future__ import annotations

from .membership import one_of
from .null import not_null
from .numeric import at_least, at_most, between, greater_than, lower_than
from .string import (
    contains,
    contains_char,
    length_between,
    matches,
    max_length,
    min_length,
    not_blank,
)

__all__ = [
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
]
