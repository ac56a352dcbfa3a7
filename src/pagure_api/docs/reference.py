"""Machine-readable API reference for external documentation generators."""

from __future__ import annotations

from typing import Any

from pagure_api.codec import encode
from pagure_api.docs.params import CAPTURE_DOCS, QUERY_PARAM_DOCS
from pagure_api.docs.samples import SampleRegistry, samples
from pagure_api.routes import ENDPOINTS, Endpoint


def describe_endpoint(
    endpoint: Endpoint, registry: SampleRegistry | None = None
) -> dict[str, Any]:
    """Return the JSON-serializable description of a single endpoint."""
    registry = registry or samples
    model = endpoint.response_model
    return {
        "name": endpoint.name,
        "method": endpoint.method.value,
        "path": endpoint.path,
        "query_params": [
            QUERY_PARAM_DOCS[name].model_dump(mode="json")
            for name in endpoint.query_params
        ],
        "captures": [
            CAPTURE_DOCS[name].model_dump(mode="json") for name in endpoint.captures
        ],
        "response": {
            "model": model.__name__,
            "schema": model.model_json_schema(by_alias=True),
            "samples": [encode(sample) for sample in registry.samples_for(model)],
        },
    }


def api_reference(registry: SampleRegistry | None = None) -> dict[str, Any]:
    """Describe every endpoint, in declaration order."""
    return {"endpoints": [describe_endpoint(endpoint, registry) for endpoint in ENDPOINTS]}


__all__ = ["api_reference", "describe_endpoint"]
