from dataclasses import FrozenInstanceError

import pytest

from predicate_validation import ValidationResult


def test_valid_result() -> None:
    result = ValidationResult.valid()
    assert result.is_valid
    assert result.message is None
    assert result


def test_invalid_result() -> None:
    result = ValidationResult.invalid("must not be null.")
    assert not result.is_valid
    assert result.message == "must not be null."
    assert not result


def test_value_equality() -> None:
    assert ValidationResult.invalid("x") == ValidationResult.invalid("x")
    assert ValidationResult.invalid("x") != ValidationResult.invalid("y")
    assert ValidationResult.valid() == ValidationResult.valid()


def test_result_is_immutable() -> None:
    result = ValidationResult.invalid("x")
    with pytest.raises(FrozenInstanceError):
        result.message = "y"  # type: ignore[misc]


def test_to_dict() -> None:
    assert ValidationResult.invalid("bad").to_dict() == {
        "valid": False,
        "message": "bad",
    }
