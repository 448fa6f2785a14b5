"""Contains results of application execution."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

from jira_sync.schemas.issues import GitLabIssueModel


class SyncStep(str, Enum):
    """Step of the per-issue pipeline that talks to a tracker."""

    CREATE_TICKET = "create_ticket"
    ADD_LABEL = "add_label"


@dataclass(frozen=True)
class IssueSynchronizationSuccess:
    """A GitLab issue whose Jira ticket was created and which was labelled."""

    gitlab_issue: GitLabIssueModel
    jira_ticket_key: str


@dataclass(frozen=True)
class IssueSynchronizationFailure:
    """A GitLab issue whose synchronization stopped at a failed step.

    When the label update fails, the Jira ticket already exists and its key
    is kept in ``jira_ticket_key``.
    """

    gitlab_issue: GitLabIssueModel
    step: SyncStep
    error: Exception
    jira_ticket_key: str | None = None


IssueSynchronizationResult: TypeAlias = IssueSynchronizationSuccess | IssueSynchronizationFailure


@dataclass
class AllIssueSynchronizationResults:
    """Contains ordered results of the issue synchronization workflow for all issues."""

    results: list[IssueSynchronizationResult] = field(default_factory=list)
    not_attempted: list[GitLabIssueModel] = field(default_factory=list)

    @property
    def succeeded(self) -> list[IssueSynchronizationSuccess]:
        """Results of issues that were fully synchronized."""
        return [result for result in self.results if isinstance(result, IssueSynchronizationSuccess)]

    @property
    def failed(self) -> list[IssueSynchronizationFailure]:
        """Results of issues whose synchronization failed."""
        return [result for result in self.results if isinstance(result, IssueSynchronizationFailure)]

    @property
    def ticket_keys_by_issue_iid(self) -> dict[int, str]:
        """Mapping from GitLab issue IID to the key of the Jira ticket created for it."""
        return {result.gitlab_issue.iid: result.jira_ticket_key for result in self.succeeded}


@dataclass
class SyncIssuesResult:
    """Contains results of the sync-issues workflow."""

    account_id: int
    issue_synchronization_results: AllIssueSynchronizationResults
