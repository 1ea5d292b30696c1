from pytest_archon import archrule


def test_combinator_independence() -> None:
    """
    The combinator core (base, predicate, result) must not import the
    boundary adapters. Failure is a value there, never an exception.
    """
    (
        archrule("combinator_is_independent")
        .match(
            "predicate_validation.base",
            "predicate_validation.predicate",
            "predicate_validation.result",
        )
        .should_not_import("predicate_validation.entity")
        .should_not_import("predicate_validation.decorators")
        .should_not_import("predicate_validation.exceptions")
        .should_not_import("predicate_validation.report")
        .check("predicate_validation", only_direct_imports=True)
    )


def test_helpers_only_build_on_core() -> None:
    """Helpers are pure factories over the core, never over adapters."""
    (
        archrule("helpers_layering")
        .match("predicate_validation.helpers*")
        .should_not_import("predicate_validation.entity")
        .should_not_import("predicate_validation.decorators")
        .should_not_import("predicate_validation.pydantic")
        .should_not_import("pydantic")
        .check("predicate_validation", only_direct_imports=True)
    )


def test_core_has_no_third_party_imports() -> None:
    """The combinator runs on the standard library alone."""
    (
        archrule("core_stdlib_only")
        .match(
            "predicate_validation.base",
            "predicate_validation.predicate",
            "predicate_validation.result",
        )
        .should_not_import("pydantic*")
        .check("predicate_validation", only_direct_imports=True)
    )
