"""Null checks."""

from __future__ import annotations

from typing import Any

from ..base import Validation
from ..predicate import from_predicate


def not_null() -> Validation[Any]:
    return from_predicate(lambda value: value is not None, "must not be null.")
