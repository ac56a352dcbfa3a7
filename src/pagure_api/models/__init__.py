"""Records mirroring the JSON payloads of the users API."""

from pagure_api.models.base import WireInt, WireModel
from pagure_api.models.repos import Repo, RepoSettings
from pagure_api.models.responses import GroupsR, UserR, UsersR
from pagure_api.models.users import User

__all__ = [
    "GroupsR",
    "Repo",
    "RepoSettings",
    "User",
    "UserR",
    "UsersR",
    "WireInt",
    "WireModel",
]
