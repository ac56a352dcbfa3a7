"""Typed contract for the Pagure users and groups API."""

from pagure_api.codec import decode, decode_json, encode, encode_json
from pagure_api.models import GroupsR, Repo, RepoSettings, User, UserR, UsersR
from pagure_api.routes import (
    ENDPOINTS,
    Endpoint,
    PreparedRequest,
    get_user,
    list_groups,
    list_users,
)
from pagure_api.settings import PagureSettings, get_settings
from pagure_api.shared import DecodeFailure, GroupName, UserFullname, Username

__all__ = [
    "ENDPOINTS",
    "DecodeFailure",
    "Endpoint",
    "GroupName",
    "GroupsR",
    "PagureSettings",
    "PreparedRequest",
    "Repo",
    "RepoSettings",
    "User",
    "UserFullname",
    "UserR",
    "Username",
    "UsersR",
    "decode",
    "decode_json",
    "encode",
    "encode_json",
    "get_settings",
    "get_user",
    "list_groups",
    "list_users",
]
