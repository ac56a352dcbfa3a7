"""User record embedded in user lookups and repository owners."""

from __future__ import annotations

from pydantic import Field

from pagure_api.models.base import WireModel
from pagure_api.shared.value_objects import UserFullname, Username  # noqa: TC001


class User(WireModel):
    """A Pagure user as it appears inside other payloads."""

    fullname: UserFullname
    username: Username = Field(alias="name")


__all__ = ["User"]
