"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio
from pathlib import Path
from typing import Sequence

from jira_sync.configuration import reconcile
from jira_sync.configuration.models import SyncIssuesConfig


def get_sync_issues_config(
    debug: bool = False,
    config_file: Path | None = None,
    gitlab_project: str | None = None,
    gitlab_issue_ids: Sequence[int] | None = None,
    jira_project: str | None = None,
    jira_epic: str | None = None,
    jira_account: str | None = None,
    link_as_description: bool = False,
    continue_on_error: bool = False,
) -> SyncIssuesConfig:
    """Synchronously get the reconciled synchronization configuration."""
    return asyncio.run(
        reconcile.reconcile_sync_issues_configuration(
            cli_debug=debug,
            cli_config_file=config_file,
            cli_gitlab_project=gitlab_project,
            cli_gitlab_issue_ids=gitlab_issue_ids,
            cli_jira_project=jira_project,
            cli_jira_epic=jira_epic,
            cli_jira_account=jira_account,
            cli_link_as_description=link_as_description,
            cli_continue_on_error=continue_on_error,
        )
    )
