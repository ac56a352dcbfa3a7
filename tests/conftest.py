"""Test configuration and fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from pagure_api.settings import get_settings


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("PAGURE_BASE_URL", "https://pagure.example.org")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings_payload() -> dict[str, Any]:
    return {
        "Minimum_score_to_merge_pull-request": -1,
        "Only_assignee_can_merge_pull-request": False,
        "Web-hooks": None,
        "issue_tracker": True,
        "project_documentation": False,
        "pull_requests": True,
    }


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return {"fullname": "Ricky Elrod", "name": "codeblock"}


@pytest.fixture
def repo_payload(
    settings_payload: dict[str, Any], user_payload: dict[str, Any]
) -> dict[str, Any]:
    return {
        "date_created": "1426595173",
        "description": "test description",
        "id": 4,
        "name": "testrepo",
        "parent": None,
        "settings": settings_payload,
        "user": user_payload,
    }


@pytest.fixture
def user_r_payload(
    repo_payload: dict[str, Any], user_payload: dict[str, Any]
) -> dict[str, Any]:
    return {"forks": [], "repos": [repo_payload], "user": user_payload}
