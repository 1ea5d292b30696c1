"""Leaf validation backed by pydantic type validation."""

from __future__ import annotations

import types
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .base import Validation
from .predicate import from_predicate


def conforms_to(type_: Any, message: str | None = None) -> Validation[Any]:
    """
    Pass when pydantic accepts the value as *type_*.

    *type_* may be a builtin, an ``Annotated`` constrained type, a generic
    alias or a ``BaseModel`` subclass. The adapter is built once, here.
    """
    adapter: TypeAdapter[Any] = TypeAdapter(type_)
    if message is None:
        message = f"must be a valid {type_name(type_)}."

    def _accepts(value: Any) -> bool:
        try:
            adapter.validate_python(value)
        except PydanticValidationError:
            return False
        return True

    return from_predicate(_accepts, message)


def type_name(type_: Any) -> str:
    """
    Readable name for a type annotation.

    ``Annotated`` metadata is dropped, generic arguments are kept:
    ``Annotated[int, Field(ge=0)]`` → ``int``, ``list[int]`` → ``list[int]``,
    ``int | None`` → ``int | None``.
    """
    if type_ is None or type_ is type(None):
        return "None"
    if type_ is Ellipsis:
        return "..."
    origin = get_origin(type_)
    if origin is None:
        if isinstance(type_, type):
            return type_.__name__
        return repr(type_).replace("typing.", "")
    args = get_args(type_)
    if origin is Annotated:
        return type_name(args[0])
    if origin is Union or origin is types.UnionType:
        return " | ".join(type_name(arg) for arg in args)
    rendered = ", ".join(type_name(arg) for arg in args)
    return f"{type_name(origin)}[{rendered}]"
