"""Sample values and parameter descriptions consumed by documentation tooling."""

from pagure_api.docs.params import (
    CAPTURE_DOCS,
    PATTERN_PARAM,
    QUERY_PARAM_DOCS,
    USERNAME_CAPTURE,
    CaptureDoc,
    ParamKind,
    QueryParamDoc,
)
from pagure_api.docs.reference import api_reference, describe_endpoint
from pagure_api.docs.samples import SampleRegistry, samples

__all__ = [
    "CAPTURE_DOCS",
    "PATTERN_PARAM",
    "QUERY_PARAM_DOCS",
    "USERNAME_CAPTURE",
    "CaptureDoc",
    "ParamKind",
    "QueryParamDoc",
    "SampleRegistry",
    "api_reference",
    "describe_endpoint",
    "samples",
]
