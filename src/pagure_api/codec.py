"""Conversion between records and their JSON wire form."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from pagure_api.models.base import WireModel
from pagure_api.shared.errors import DecodeFailure

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=WireModel)


def decode(model: type[ModelT], payload: Any) -> ModelT:
    """Decode an already parsed JSON value into *model*.

    Keys are matched against wire names only. Any shape mismatch, including a
    non-object payload or a missing key at any depth, raises
    :class:`DecodeFailure` and nothing is returned.
    """
    try:
        return model.model_validate(payload, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise _failure(model, exc) from exc


def decode_json(model: type[ModelT], raw: str | bytes | bytearray) -> ModelT:
    """Decode a JSON document into *model*; malformed JSON is a decode failure."""
    try:
        return model.model_validate_json(raw, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise _failure(model, exc) from exc


def encode(value: WireModel) -> dict[str, Any]:
    """Return the JSON object for *value*, keyed by wire names.

    Keys follow field declaration order and nullable fields are emitted as
    ``None`` rather than dropped.
    """
    return value.model_dump(mode="json", by_alias=True)


def encode_json(value: WireModel) -> str:
    """Return *value* serialized as a JSON document."""
    return value.model_dump_json(by_alias=True)


def _failure(model: type[WireModel], error: ValidationError) -> DecodeFailure:
    failure = DecodeFailure.from_validation_error(model.__name__, error)
    logger.debug("Failed to decode %s at %s", failure.model, ", ".join(failure.locations))
    return failure


__all__ = ["decode", "decode_json", "encode", "encode_json"]
