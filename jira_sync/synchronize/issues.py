"""Contains synchronization logic for migrating GitLab issues to Jira tickets."""

from typing import Callable, Sequence

import structlog

from jira_sync.configuration.models import JiraCustomFieldIds
from jira_sync.schemas.issues import GitLabIssueModel
from jira_sync.synchronize.descriptions import render_jira_description
from jira_sync.synchronize.results import (
    AllIssueSynchronizationResults,
    IssueSynchronizationFailure,
    IssueSynchronizationResult,
    IssueSynchronizationSuccess,
    SyncStep,
)
from jira_sync.synchronize.tickets import build_jira_ticket_request
from jira_sync.trackers.abc import SourceTrackerBase, TargetTrackerBase
from jira_sync.utils.constants import TICKET_CREATED_LABEL

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def fetch_gitlab_issues(gitlab_adapter: SourceTrackerBase, issue_iids: Sequence[int]) -> list[GitLabIssueModel]:
    """Fetch GitLab issues by IID, in the given order.

    The first failed lookup propagates and no issues are returned.
    """
    gitlab_issues: list[GitLabIssueModel] = []
    for issue_iid in issue_iids:
        logger.debug("Fetching GitLab issue", issue_iid=issue_iid)
        gitlab_issues.append(await gitlab_adapter.get_issue(issue_iid))
    logger.info("Fetched GitLab issues", issue_count=len(gitlab_issues))
    return gitlab_issues


async def sync_gitlab_issue_to_jira(
    gitlab_issue: GitLabIssueModel,
    jira_adapter: TargetTrackerBase,
    gitlab_adapter: SourceTrackerBase,
    jira_project: str,
    jira_epic: str,
    account_id: int,
    custom_field_ids: JiraCustomFieldIds,
    link_as_description: bool,
) -> IssueSynchronizationResult:
    """Create the Jira ticket for one GitLab issue, then label the GitLab issue.

    A ticket created before a failed label update is not deleted; its key is
    reported on the failure.
    """
    description = render_jira_description(gitlab_issue, link_as_description)
    ticket_request = build_jira_ticket_request(
        gitlab_issue=gitlab_issue,
        description=description,
        jira_project=jira_project,
        jira_epic=jira_epic,
        account_id=account_id,
        custom_field_ids=custom_field_ids,
    )

    try:
        jira_ticket = await jira_adapter.create_issue(ticket_request.to_fields())
    except Exception as exc:
        logger.error("Failed to create Jira issue", issue_iid=gitlab_issue.iid, issue_title=gitlab_issue.title, error=str(exc))
        return IssueSynchronizationFailure(gitlab_issue, SyncStep.CREATE_TICKET, exc)
    logger.info("Created Jira issue", issue_iid=gitlab_issue.iid, jira_issue_key=jira_ticket.key)

    try:
        await gitlab_adapter.add_issue_labels(gitlab_issue.iid, [TICKET_CREATED_LABEL])
    except Exception as exc:
        logger.error(
            "Failed to label GitLab issue after creating Jira issue",
            issue_iid=gitlab_issue.iid,
            jira_issue_key=jira_ticket.key,
            label=TICKET_CREATED_LABEL,
            error=str(exc),
        )
        return IssueSynchronizationFailure(gitlab_issue, SyncStep.ADD_LABEL, exc, jira_ticket_key=jira_ticket.key)
    logger.info("Labelled GitLab issue", issue_iid=gitlab_issue.iid, label=TICKET_CREATED_LABEL)

    return IssueSynchronizationSuccess(gitlab_issue, jira_ticket.key)


async def sync_gitlab_issues_to_jira(
    gitlab_issues: Sequence[GitLabIssueModel],
    jira_adapter: TargetTrackerBase,
    gitlab_adapter: SourceTrackerBase,
    jira_project: str,
    jira_epic: str,
    account_id: int,
    custom_field_ids: JiraCustomFieldIds,
    link_as_description: bool = False,
    continue_on_error: bool = False,
    on_issue_synced: Callable[[IssueSynchronizationSuccess], None] | None = None,
) -> AllIssueSynchronizationResults:
    """Synchronize GitLab issues to Jira one at a time, in order.

    By default the batch stops at the first failure: issues already
    synchronized keep their tickets and labels, and the remaining issues are
    reported as not attempted. With ``continue_on_error`` every issue is
    attempted.
    """
    all_results = AllIssueSynchronizationResults()
    for index, gitlab_issue in enumerate(gitlab_issues):
        result = await sync_gitlab_issue_to_jira(
            gitlab_issue=gitlab_issue,
            jira_adapter=jira_adapter,
            gitlab_adapter=gitlab_adapter,
            jira_project=jira_project,
            jira_epic=jira_epic,
            account_id=account_id,
            custom_field_ids=custom_field_ids,
            link_as_description=link_as_description,
        )
        all_results.results.append(result)

        if isinstance(result, IssueSynchronizationSuccess):
            if on_issue_synced is not None:
                on_issue_synced(result)
        elif not continue_on_error:
            all_results.not_attempted.extend(gitlab_issues[index + 1 :])
            logger.warning(
                "Stopping synchronization after failure",
                issue_iid=gitlab_issue.iid,
                step=result.step.value,
                not_attempted=[issue.iid for issue in all_results.not_attempted],
            )
            break
    return all_results
