from dataclasses import FrozenInstanceError

import pytest

from predicate_validation import ValidationReport


def test_empty_report_is_valid() -> None:
    report = ValidationReport()
    assert report
    assert report.is_valid
    assert report.first_error() is None


def test_for_field() -> None:
    report = ValidationReport.for_field("email", "must contain @.")
    assert not report
    assert report.errors == {"email": ["must contain @."]}
    assert report.first_error() == ("email", "must contain @.")


def test_merge_keeps_field_order_and_does_not_mutate_operands() -> None:
    r1 = ValidationReport({"a": ["1"]})
    r2 = ValidationReport({"a": ["2"], "b": ["3"]})

    merged = r1.merge(r2)

    assert merged.errors == {"a": ["1", "2"], "b": ["3"]}
    assert merged.first_error() == ("a", "1")
    assert r1.errors == {"a": ["1"]}
    assert r2.errors == {"a": ["2"], "b": ["3"]}


def test_callers_dict_is_copied() -> None:
    errors = {"a": ["1"]}
    report = ValidationReport(errors)

    merged = report.merge(ValidationReport.for_field("a", "2"))
    errors["a"].append("outside")

    assert errors == {"a": ["1", "outside"]}
    assert report.errors == {"a": ["1"]}
    assert merged.errors == {"a": ["1", "2"]}


def test_report_is_frozen() -> None:
    report = ValidationReport()
    with pytest.raises(FrozenInstanceError):
        report.errors = {"a": ["1"]}  # type: ignore[misc]


def test_first_error_skips_empty_message_lists() -> None:
    report = ValidationReport({"a": [], "b": ["2"]})
    assert report.first_error() == ("b", "2")


def test_to_dict() -> None:
    report = ValidationReport({"a": ["1"]})
    assert report.to_dict() == {"valid": False, "errors": {"a": ["1"]}}
