"""Primitive types and errors shared across the package."""

from pagure_api.shared.errors import DecodeFailure
from pagure_api.shared.value_objects import GroupName, UserFullname, Username

__all__ = [
    "DecodeFailure",
    "GroupName",
    "UserFullname",
    "Username",
]
