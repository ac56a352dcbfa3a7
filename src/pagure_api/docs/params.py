"""Human-readable descriptions of query parameters and path captures."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ParamKind(StrEnum):
    """How a query parameter is written in the query string."""

    NORMAL = "normal"
    LIST = "list"
    FLAG = "flag"


class QueryParamDoc(BaseModel):
    """Documentation for a single query parameter."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    values: tuple[str, ...] = Field(default_factory=tuple)
    description: str
    kind: ParamKind = ParamKind.NORMAL


class CaptureDoc(BaseModel):
    """Documentation for a path capture."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str


PATTERN_PARAM = QueryParamDoc(
    name="pattern",
    values=("Fed*", "*web*", "*ora", "..."),
    description="An optional pattern to filter by",
)

USERNAME_CAPTURE = CaptureDoc(
    name="username",
    description="The username of the user",
)

QUERY_PARAM_DOCS: dict[str, QueryParamDoc] = {PATTERN_PARAM.name: PATTERN_PARAM}
CAPTURE_DOCS: dict[str, CaptureDoc] = {USERNAME_CAPTURE.name: USERNAME_CAPTURE}


__all__ = [
    "CAPTURE_DOCS",
    "PATTERN_PARAM",
    "QUERY_PARAM_DOCS",
    "USERNAME_CAPTURE",
    "CaptureDoc",
    "ParamKind",
    "QueryParamDoc",
]
