"""Error types raised while turning wire payloads into records."""

from __future__ import annotations

from pydantic import ValidationError


class DecodeFailure(ValueError):
    """Raised when a JSON value does not have the shape of the target type."""

    def __init__(self, model: str, locations: tuple[str, ...] = ()) -> None:
        self.model = model
        self.locations = locations
        if locations:
            message = f"Could not decode {model}: invalid {', '.join(locations)}"
        else:
            message = f"Could not decode {model}"
        super().__init__(message)

    @classmethod
    def from_validation_error(cls, model: str, error: ValidationError) -> DecodeFailure:
        """Build a failure whose locations are the wire key paths of *error*."""
        locations = tuple(
            ".".join(str(part) for part in detail["loc"]) or "<root>"
            for detail in error.errors()
        )
        return cls(model, locations)


__all__ = ["DecodeFailure"]
