"""Membership check against a fixed set of options."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..base import Validation
from ..predicate import from_predicate

if TYPE_CHECKING:
    from collections.abc import Iterable


def one_of(options: Iterable[Any]) -> Validation[Any]:
    allowed = tuple(options)
    rendered = ", ".join(str(option) for option in allowed)
    return from_predicate(lambda value: value in allowed, f"must be one of {rendered}.")
