"""Base class and shared field types for records exchanged with the Pagure API."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, StrictInt
from pydantic.config import ConfigDict


def _whole_float_to_int(value: Any) -> Any:
    """Turn a float with an integral value into an ``int``."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


WireInt = Annotated[StrictInt, BeforeValidator(_whole_float_to_int)]
"""JSON integer: whole-valued numbers such as ``1.0`` are accepted, strings and
booleans are not."""


class WireModel(BaseModel):
    """Immutable record whose JSON keys are declared as field aliases.

    Records are built in Python code by attribute name and always serialized
    by wire key. The codec decodes strictly by wire key.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )


__all__ = ["WireInt", "WireModel"]
