"""Orchestrates the synchronization of GitLab issues to Jira."""

import time
from typing import Callable

import structlog

from jira_sync.configuration.models import SyncIssuesConfig
from jira_sync.synchronize.accounts import resolve_account_id
from jira_sync.synchronize.issues import fetch_gitlab_issues, sync_gitlab_issues_to_jira
from jira_sync.synchronize.results import IssueSynchronizationSuccess, SyncIssuesResult
from jira_sync.trackers.gitlab_adapter import PythonGitLabAdapter
from jira_sync.trackers.jira_adapter import JiraAdapter

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_sync_issues_workflow(
    config: SyncIssuesConfig,
    on_issue_synced: Callable[[IssueSynchronizationSuccess], None] | None = None,
) -> SyncIssuesResult:
    """Run the sync-issues workflow: resolve the account, fetch the issues, and synchronize them.

    Account resolution and issue fetching errors propagate before any ticket
    is created. Per-issue errors are recorded in the returned results.
    """
    jira_adapter = await JiraAdapter.create(
        jira_url=config.jira_url,
        jira_username=config.jira_username,
        jira_password=config.jira_password,
    )
    gitlab_adapter = await PythonGitLabAdapter.create(
        project=config.gitlab_project,
        gitlab_token=config.gitlab_token,
        gitlab_url=config.gitlab_url,
    )

    account_id = await resolve_account_id(jira_adapter, config.jira_account)

    start_time = time.time()
    logger.info("Fetching GitLab issues", start_time=start_time, issue_iids=list(config.gitlab_issue_ids))
    gitlab_issues = await fetch_gitlab_issues(gitlab_adapter, config.gitlab_issue_ids)
    end_time = time.time()
    logger.info("Fetched GitLab issues", duration=round(end_time - start_time, 2), issue_count=len(gitlab_issues))

    start_time = time.time()
    logger.info("Processing issues", start_time=start_time)
    issue_sync_results = await sync_gitlab_issues_to_jira(
        gitlab_issues,
        jira_adapter,
        gitlab_adapter,
        jira_project=config.jira_project,
        jira_epic=config.jira_epic,
        account_id=account_id,
        custom_field_ids=config.jira_custom_field_ids,
        link_as_description=config.link_as_description,
        continue_on_error=config.continue_on_error,
        on_issue_synced=on_issue_synced,
    )
    end_time = time.time()
    logger.info(
        "Processed issues",
        start_time=start_time,
        end_time=end_time,
        duration=round(end_time - start_time, 2),
        desired_issue_count=len(gitlab_issues),
        succeeded_count=len(issue_sync_results.succeeded),
        failed_count=len(issue_sync_results.failed),
        not_attempted_count=len(issue_sync_results.not_attempted),
        ticket_keys=issue_sync_results.ticket_keys_by_issue_iid,
    )
    return SyncIssuesResult(account_id, issue_sync_results)
