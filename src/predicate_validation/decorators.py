"""validate_arguments — checks call arguments before the function runs."""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import ValidationFailedError

if TYPE_CHECKING:
    from collections.abc import Callable

    from .base import Validation

logger = logging.getLogger("predicate_validation.decorators")

F = TypeVar("F", bound="Callable[..., Any]")


def validate_arguments(**rules: Validation[Any]) -> Callable[[F], F]:
    """
    Validate named arguments on every call, failing fast.

    Rules run in keyword order against the bound arguments (defaults
    applied). The first failure raises ValidationFailedError and the
    wrapped function is not called.

    Usage::

        @validate_arguments(name=not_null() & length_between(2, 12))
        def register(name: str) -> User: ...

    Raises:
        TypeError: At decoration time, if a rule names an unknown parameter.
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        unknown = sorted(set(rules) - set(signature.parameters))
        if unknown:
            raise TypeError(
                f"{func.__qualname__}() has no parameter(s): {', '.join(unknown)}"
            )

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            for name, validation in rules.items():
                result = validation.evaluate(bound.arguments[name])
                if not result.is_valid:
                    message = result.message if result.message is not None else ""
                    logger.debug(
                        "Rejected call to %s: %s %s",
                        func.__qualname__,
                        name,
                        message,
                    )
                    raise ValidationFailedError({name: [message]})
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
