"""Response envelopes, one per endpoint.

Response types end in ``R``. The ``total_*`` counts come straight from the
server and are not checked against the length of the returned sequences.
"""

from __future__ import annotations

from pydantic import Field

from pagure_api.models.base import WireInt, WireModel
from pagure_api.models.repos import Repo  # noqa: TC001
from pagure_api.models.users import User  # noqa: TC001
from pagure_api.shared.value_objects import GroupName, Username  # noqa: TC001


class GroupsR(WireModel):
    """``/api/0/groups`` endpoint response."""

    group_names: tuple[GroupName, ...] = Field(alias="groups")
    total_groups: WireInt


class UsersR(WireModel):
    """``/api/0/users`` endpoint response."""

    usernames: tuple[Username, ...] = Field(alias="users")
    total_users: WireInt


class UserR(WireModel):
    """``/api/0/user/{username}`` endpoint response."""

    forks: tuple[Repo, ...]
    repos: tuple[Repo, ...]
    user: User


__all__ = ["GroupsR", "UserR", "UsersR"]
