"""Route descriptions for the users API."""

from pagure_api.routes.base import Endpoint, HttpMethod, PreparedRequest
from pagure_api.routes.users import (
    ENDPOINTS,
    GET_USER,
    LIST_GROUPS,
    LIST_USERS,
    get_endpoint,
    get_user,
    list_groups,
    list_users,
)

__all__ = [
    "ENDPOINTS",
    "GET_USER",
    "LIST_GROUPS",
    "LIST_USERS",
    "Endpoint",
    "HttpMethod",
    "PreparedRequest",
    "get_endpoint",
    "get_user",
    "list_groups",
    "list_users",
]
