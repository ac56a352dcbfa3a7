"""Group and user endpoints of the Pagure API (version 0)."""

from __future__ import annotations

from pagure_api.models import GroupsR, UserR, UsersR
from pagure_api.routes.base import Endpoint, PreparedRequest
from pagure_api.shared.value_objects import Username  # noqa: TC001

API_PREFIX = "/api/0"

LIST_GROUPS: Endpoint[GroupsR] = Endpoint(
    name="list_groups",
    path=f"{API_PREFIX}/groups",
    response_model=GroupsR,
    query_params=("pattern",),
)

LIST_USERS: Endpoint[UsersR] = Endpoint(
    name="list_users",
    path=f"{API_PREFIX}/users",
    response_model=UsersR,
    query_params=("pattern",),
)

GET_USER: Endpoint[UserR] = Endpoint(
    name="get_user",
    path=f"{API_PREFIX}/user/{{username}}",
    response_model=UserR,
    captures=("username",),
)

ENDPOINTS: tuple[Endpoint, ...] = (LIST_GROUPS, LIST_USERS, GET_USER)

_BY_NAME = {endpoint.name: endpoint for endpoint in ENDPOINTS}


def get_endpoint(name: str) -> Endpoint:
    """Return the endpoint registered under *name*."""
    try:
        return _BY_NAME[name]
    except KeyError:
        msg = f"Unknown endpoint '{name}'."
        raise KeyError(msg) from None


def list_groups(pattern: str | None = None) -> PreparedRequest:
    """List groups, optionally filtered by a glob-like *pattern*."""
    return LIST_GROUPS.prepare(pattern=pattern)


def list_users(pattern: str | None = None) -> PreparedRequest:
    """List users, optionally filtered by a glob-like *pattern*."""
    return LIST_USERS.prepare(pattern=pattern)


def get_user(username: Username) -> PreparedRequest:
    """Look up a single user with their forks and repositories."""
    return GET_USER.prepare(username=username)


__all__ = [
    "API_PREFIX",
    "ENDPOINTS",
    "GET_USER",
    "LIST_GROUPS",
    "LIST_USERS",
    "get_endpoint",
    "get_user",
    "list_groups",
    "list_users",
]
