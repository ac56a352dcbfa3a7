"""Declarative description of API endpoints and the requests they produce."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, TypeVar
from urllib.parse import urlencode

from pagure_api.codec import decode, decode_json
from pagure_api.models.base import WireModel
from pagure_api.settings import get_settings

ModelT = TypeVar("ModelT", bound=WireModel)


class HttpMethod(StrEnum):
    """HTTP verbs used by the described endpoints."""

    GET = "GET"


@dataclass(frozen=True, slots=True)
class PreparedRequest:
    """Transport-neutral description of a single call.

    ``params`` holds (name, value) pairs for the query parameters that were
    actually supplied, in declaration order, with their values untouched.
    """

    method: HttpMethod
    path: str
    params: tuple[tuple[str, str], ...] = ()

    def url(self, base_url: str | None = None) -> str:
        """Return the absolute URL, defaulting to the configured instance."""
        base = base_url if base_url is not None else get_settings().base_url
        url = f"{base.rstrip('/')}{self.path}"
        if self.params:
            url = f"{url}?{urlencode(self.params)}"
        return url


@dataclass(frozen=True, slots=True)
class Endpoint(Generic[ModelT]):
    """A fixed path with optional query parameters and path captures.

    ``path`` is a template where every capture appears as ``{name}``.
    """

    name: str
    path: str
    response_model: type[ModelT]
    query_params: tuple[str, ...] = ()
    captures: tuple[str, ...] = ()
    method: HttpMethod = HttpMethod.GET

    def prepare(self, **arguments: str | None) -> PreparedRequest:
        """Build the request for this endpoint from keyword *arguments*.

        Captures are required and substituted into the path verbatim. Query
        parameters left as ``None`` are omitted.
        """
        unknown = sorted(set(arguments) - set(self.query_params) - set(self.captures))
        if unknown:
            msg = f"{self.name}() got unexpected arguments: {', '.join(unknown)}"
            raise TypeError(msg)
        missing = [name for name in self.captures if arguments.get(name) is None]
        if missing:
            msg = f"{self.name}() missing required captures: {', '.join(missing)}"
            raise TypeError(msg)

        path = self.path.format(**{name: arguments[name] for name in self.captures})
        params = tuple(
            (name, value)
            for name in self.query_params
            if (value := arguments.get(name)) is not None
        )
        return PreparedRequest(method=self.method, path=path, params=params)

    def decode_response(self, payload: Any) -> ModelT:
        """Decode a response body, given as parsed JSON or as a raw document."""
        if isinstance(payload, str | bytes | bytearray):
            return decode_json(self.response_model, payload)
        return decode(self.response_model, payload)


__all__ = ["Endpoint", "HttpMethod", "PreparedRequest"]
