"""Primitive wrapper types shared by the data model and the routes.

The wrappers only exist for type checking: at runtime each one is the plain
``str`` it wraps, so equality, ordering and the JSON form are the string's.
"""

from __future__ import annotations

from typing import NewType

GroupName = NewType("GroupName", str)
"""A Pagure group. The API only ever tells us its name."""

Username = NewType("Username", str)
"""A Pagure username, also used verbatim as a URL path segment."""

UserFullname = NewType("UserFullname", str)
"""The display name of a user."""


__all__ = ["GroupName", "UserFullname", "Username"]
