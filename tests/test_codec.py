"""Tests for JSON encoding and decoding of records."""

import json
import logging
from typing import Any

import pytest

from pagure_api.codec import decode, decode_json, encode, encode_json
from pagure_api.docs import samples
from pagure_api.docs.samples import TEST_REPO
from pagure_api.models import GroupsR, Repo, RepoSettings, User, UserR, UsersR
from pagure_api.shared import DecodeFailure


@pytest.mark.parametrize("model", [GroupsR, UsersR, UserR])
def test_samples_round_trip(model: type) -> None:
    for sample in samples.samples_for(model):
        assert decode(model, encode(sample)) == sample
        assert decode_json(model, encode_json(sample)) == sample


def test_forked_repo_round_trips() -> None:
    fork = TEST_REPO.model_copy(
        update={
            "id_": 5,
            "parent": TEST_REPO,
            "settings": TEST_REPO.settings.model_copy(
                update={"web_hooks_url": "http://example.com/hook"}
            ),
        }
    )

    assert decode(Repo, encode(fork)) == fork


def test_wrapper_types_encode_as_bare_strings() -> None:
    encoded = encode(samples.first_sample(GroupsR))

    assert encoded == {"groups": ["Fedora-Infra"], "total_groups": 1}


def test_repo_encodes_wire_keys_in_declaration_order() -> None:
    encoded = encode(TEST_REPO)

    assert list(encoded) == [
        "date_created",
        "description",
        "id",
        "name",
        "parent",
        "settings",
        "user",
    ]
    assert list(encoded["settings"]) == [
        "Minimum_score_to_merge_pull-request",
        "Only_assignee_can_merge_pull-request",
        "Web-hooks",
        "issue_tracker",
        "project_documentation",
        "pull_requests",
    ]
    assert encoded["user"] == {"fullname": "Ricky Elrod", "name": "codeblock"}


def test_nullable_fields_are_encoded_as_null() -> None:
    encoded = encode(TEST_REPO)

    assert "parent" in encoded
    assert encoded["parent"] is None
    assert encoded["settings"]["Web-hooks"] is None


def test_encode_matches_wire_payload(user_r_payload: dict[str, Any]) -> None:
    assert encode(samples.first_sample(UserR)) == user_r_payload


def test_encode_json_is_a_json_document() -> None:
    document = encode_json(samples.first_sample(UsersR))

    assert json.loads(document) == {"users": ["codeblock"], "total_users": 1}


def test_decode_json_accepts_bytes() -> None:
    groups = decode_json(GroupsR, b'{"groups":["Fedora-Infra"],"total_groups":1}')

    assert groups.group_names == ("Fedora-Infra",)


def test_decode_json_rejects_malformed_document() -> None:
    with pytest.raises(DecodeFailure) as exc_info:
        decode_json(GroupsR, '{"groups": [')

    assert exc_info.value.model == "GroupsR"


def test_decode_json_rejects_array_document() -> None:
    with pytest.raises(DecodeFailure):
        decode_json(GroupsR, "[]")


def test_decode_failure_keeps_validation_error_as_cause() -> None:
    with pytest.raises(DecodeFailure) as exc_info:
        decode(RepoSettings, {})

    assert exc_info.value.__cause__ is not None
    assert len(exc_info.value.locations) == 6
    assert "RepoSettings" in str(exc_info.value)


def test_decode_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pagure_api.codec"):
        with pytest.raises(DecodeFailure):
            decode(User, {"fullname": "Ricky Elrod"})

    assert "Failed to decode User at name" in caplog.text


def test_decode_failure_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        decode(User, [])
