"""Shared fixtures for predicate-validation tests."""

from __future__ import annotations

from typing import Any

import pytest

from predicate_validation import Validation, from_predicate


class CountingPredicate:
    """Predicate wrapper that records how often it was invoked."""

    def __init__(self, outcome: bool) -> None:
        self.outcome = outcome
        self.calls = 0

    def __call__(self, value: Any) -> bool:
        self.calls += 1
        return self.outcome


@pytest.fixture
def counting():
    """Factory: ``counting(outcome, message)`` → (validation, predicate)."""

    def make(outcome: bool, message: str) -> tuple[Validation[Any], CountingPredicate]:
        predicate = CountingPredicate(outcome)
        return from_predicate(predicate, message), predicate

    return make
