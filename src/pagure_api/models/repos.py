"""Repository records used by various endpoints of the API."""

from __future__ import annotations

from pydantic import Field, StrictBool

from pagure_api.models.base import WireInt, WireModel
from pagure_api.models.users import User  # noqa: TC001


class RepoSettings(WireModel):
    """The ``settings`` dictionary of a repository.

    Pagure names these keys after the labels of its settings form, hence the
    mixed casing and hyphens on the wire.
    """

    minimum_score_to_merge_pr: WireInt = Field(
        alias="Minimum_score_to_merge_pull-request"
    )
    only_assignee_can_merge_pr: StrictBool = Field(
        alias="Only_assignee_can_merge_pull-request"
    )
    web_hooks_url: str | None = Field(alias="Web-hooks")
    issue_tracker_enabled: StrictBool = Field(alias="issue_tracker")
    project_documentation_enabled: StrictBool = Field(alias="project_documentation")
    pull_requests_enabled: StrictBool = Field(alias="pull_requests")


class Repo(WireModel):
    """A repository as returned by the API.

    ``parent`` is set on forks and holds the forked repository, which may
    itself be a fork. The key is always present on the wire and is ``null``
    for repositories that are not forks.
    """

    date_created: str
    description: str
    id_: WireInt = Field(alias="id")
    name: str
    parent: Repo | None
    settings: RepoSettings
    owner: User = Field(alias="user")

    def ancestors(self) -> tuple[Repo, ...]:
        """Return the chain of parents, nearest first."""
        chain: list[Repo] = []
        current = self.parent
        while current is not None:
            chain.append(current)
            current = current.parent
        return tuple(chain)

    @property
    def is_fork(self) -> bool:
        return self.parent is not None


__all__ = ["Repo", "RepoSettings"]
