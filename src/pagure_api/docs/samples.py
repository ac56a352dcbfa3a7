"""Canonical example values for each response type."""

from __future__ import annotations

from collections import defaultdict
from typing import TypeVar

from pagure_api.models import GroupsR, Repo, RepoSettings, User, UserR, UsersR
from pagure_api.models.base import WireModel
from pagure_api.shared import GroupName, UserFullname, Username

ModelT = TypeVar("ModelT", bound=WireModel)


class SampleRegistry:
    """Example values keyed by record type, kept in registration order."""

    def __init__(self) -> None:
        self._samples: defaultdict[type[WireModel], list[WireModel]] = defaultdict(list)

    def register(self, model: type[ModelT], *samples: ModelT) -> None:
        """Append *samples* to the examples of *model*."""
        for sample in samples:
            if not isinstance(sample, model):
                msg = f"Sample {sample!r} is not a {model.__name__}."
                raise TypeError(msg)
        self._samples[model].extend(samples)

    def samples_for(self, model: type[ModelT]) -> tuple[ModelT, ...]:
        """Return every example registered for *model*."""
        return tuple(self._samples.get(model, ()))  # type: ignore[arg-type]

    def first_sample(self, model: type[ModelT]) -> ModelT:
        """Return the first example of *model*, raising ``LookupError`` if none."""
        found = self.samples_for(model)
        if not found:
            msg = f"No samples registered for {model.__name__}."
            raise LookupError(msg)
        return found[0]

    def models(self) -> tuple[type[WireModel], ...]:
        return tuple(model for model, found in self._samples.items() if found)


RICKY = User(fullname=UserFullname("Ricky Elrod"), username=Username("codeblock"))

TEST_REPO = Repo(
    date_created="1426595173",
    description="test description",
    id_=4,
    name="testrepo",
    parent=None,
    settings=RepoSettings(
        minimum_score_to_merge_pr=-1,
        only_assignee_can_merge_pr=False,
        web_hooks_url=None,
        issue_tracker_enabled=True,
        project_documentation_enabled=False,
        pull_requests_enabled=True,
    ),
    owner=RICKY,
)

samples = SampleRegistry()
samples.register(
    GroupsR,
    GroupsR(group_names=(GroupName("Fedora-Infra"),), total_groups=1),
    GroupsR(
        group_names=(GroupName("Fedora-Infra"), GroupName("fedora-web")),
        total_groups=2,
    ),
)
samples.register(
    UsersR,
    UsersR(usernames=(Username("codeblock"),), total_users=1),
    UsersR(usernames=(Username("codelock"), Username("janedoe")), total_users=2),
)
samples.register(UserR, UserR(forks=(), repos=(TEST_REPO,), user=RICKY))


__all__ = ["RICKY", "TEST_REPO", "SampleRegistry", "samples"]
