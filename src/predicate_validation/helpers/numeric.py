"""Numeric comparisons and inclusive ranges."""

from __future__ import annotations

from typing import Any

from ..base import Validation
from ..predicate import from_predicate


def greater_than(bound: Any) -> Validation[Any]:
    return from_predicate(lambda value: value > bound, f"must be greater than {bound}.")


def lower_than(bound: Any) -> Validation[Any]:
    return from_predicate(lambda value: value < bound, f"must be lower than {bound}.")


def at_least(bound: Any) -> Validation[Any]:
    return from_predicate(lambda value: value >= bound, f"must be at least {bound}.")


def at_most(bound: Any) -> Validation[Any]:
    return from_predicate(lambda value: value <= bound, f"must be at most {bound}.")


def between(lower: Any, upper: Any) -> Validation[Any]:
    """
    Inclusive range ``lower <= value <= upper``.

    Raises:
        ValueError: If ``lower > upper``.
    """
    if lower > upper:
        raise ValueError(f"lower ({lower}) must not exceed upper ({upper})")
    return at_least(lower).and_(at_most(upper))
