"""String checks: length bounds, containment, blankness and patterns."""

from __future__ import annotations

import re

from ..base import Validation
from ..predicate import from_predicate


def min_length(size: int) -> Validation[str]:
    return from_predicate(
        lambda value: len(value) >= size, f"must have at least {size} chars."
    )


def max_length(size: int) -> Validation[str]:
    return from_predicate(
        lambda value: len(value) <= size, f"must have at most {size} chars."
    )


def length_between(min_size: int, max_size: int) -> Validation[str]:
    """
    Inclusive length range, reported by whichever bound fails.

    Raises:
        ValueError: If ``min_size > max_size``.
    """
    if min_size > max_size:
        raise ValueError(
            f"min_size ({min_size}) must not exceed max_size ({max_size})"
        )
    return min_length(min_size).and_(max_length(max_size))


def contains(fragment: str) -> Validation[str]:
    return from_predicate(lambda value: fragment in value, f"must contain {fragment}.")


# Kept under the name used for single-character checks such as "@".
contains_char = contains


def not_blank() -> Validation[str]:
    return from_predicate(lambda value: value.strip() != "", "must not be blank.")


def matches(pattern: str | re.Pattern[str]) -> Validation[str]:
    """Whole-string regular expression match."""
    compiled = re.compile(pattern)
    return from_predicate(
        lambda value: compiled.fullmatch(value) is not None,
        f"must match pattern {compiled.pattern}.",
    )
