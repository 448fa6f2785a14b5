"""Unit tests for the Typer command line interface."""

from pathlib import Path
from typing import Any, Callable, Generator
from unittest.mock import AsyncMock, patch

import pytest
from jira import JIRAError
from typer.testing import CliRunner

from jira_sync.configuration.cli import typer_app
from jira_sync.synchronize.results import (
    AllIssueSynchronizationResults,
    IssueSynchronizationFailure,
    IssueSynchronizationSuccess,
    SyncIssuesResult,
    SyncStep,
)

from .utils import make_gitlab_issue

runner = CliRunner()

SYNC_ARGUMENTS = [
    "--gitlab-project",
    "group/project",
    "-i",
    "3",
    "-i",
    "4,5",
    "--jira-project",
    "SE",
    "--jira-epic",
    "SE-100",
    "--jira-account",
    "ABC",
]


@pytest.fixture(autouse=True)
def no_logging_configuration() -> Generator[None, None, None]:
    """Keep the CLI from reconfiguring logging during tests."""
    with patch("jira_sync.configuration.cli.configure_logging"):
        yield


@pytest.fixture
def credentials(isolated_environment: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide credentials through environment variables."""
    monkeypatch.setenv("GITLAB_TOKEN", "env-token")
    monkeypatch.setenv("JIRA_URL", "https://jira.example.com")


def workflow_returning(results: AllIssueSynchronizationResults) -> AsyncMock:
    """Build a workflow mock that reports successes through the callback and returns the results."""

    async def run(config: Any, on_issue_synced: Callable[[IssueSynchronizationSuccess], None] | None = None) -> SyncIssuesResult:
        for result in results.succeeded:
            if on_issue_synced is not None:
                on_issue_synced(result)
        return SyncIssuesResult(7, results)

    return AsyncMock(side_effect=run)


def test_version() -> None:
    """Test that --version prints the version and exits."""
    result = runner.invoke(typer_app, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("jira-sync version ")


@pytest.mark.usefixtures("credentials")
def test_sync_prints_one_line_per_synced_issue() -> None:
    """Test that every synced issue is confirmed on standard output."""
    issues = [make_gitlab_issue(3), make_gitlab_issue(4), make_gitlab_issue(5)]
    results = AllIssueSynchronizationResults(
        results=[IssueSynchronizationSuccess(issue, f"SE-{n}") for n, issue in enumerate(issues, start=1)]
    )
    workflow = workflow_returning(results)

    with patch("jira_sync.configuration.cli.run_sync_issues_workflow", new=workflow):
        result = runner.invoke(typer_app, SYNC_ARGUMENTS)

    assert result.exit_code == 0, result.output
    assert "Jira issue SE-1 is created from 3" in result.output
    assert "Jira issue SE-2 is created from 4" in result.output
    assert "Jira issue SE-3 is created from 5" in result.output
    config = workflow.await_args.args[0]
    assert config.gitlab_issue_ids == (3, 4, 5)
    assert config.gitlab_token == "env-token"


@pytest.mark.usefixtures("credentials")
def test_sync_failure_exits_non_zero() -> None:
    """Test that a failed issue is reported and the command exits with an error."""
    error = JIRAError(status_code=400, text="Field 'summary' is required")
    results = AllIssueSynchronizationResults(
        results=[
            IssueSynchronizationSuccess(make_gitlab_issue(3), "SE-1"),
            IssueSynchronizationFailure(make_gitlab_issue(4), SyncStep.CREATE_TICKET, error),
        ],
        not_attempted=[make_gitlab_issue(5)],
    )

    with patch("jira_sync.configuration.cli.run_sync_issues_workflow", new=workflow_returning(results)):
        result = runner.invoke(typer_app, SYNC_ARGUMENTS)

    assert result.exit_code == 1
    assert "Jira issue SE-1 is created from 3" in result.output
    assert "GitLab issue 4 failed at step create_ticket" in result.output
    assert "Not attempted: 5" in result.output


@pytest.mark.usefixtures("credentials")
def test_sync_resolution_error_exits_non_zero() -> None:
    """Test that an error raised before any issue is synced is reported."""
    workflow = AsyncMock(side_effect=JIRAError(status_code=404, text="Account not found"))

    with patch("jira_sync.configuration.cli.run_sync_issues_workflow", new=workflow):
        result = runner.invoke(typer_app, SYNC_ARGUMENTS)

    assert result.exit_code == 1
    assert "Account not found" in result.output


@pytest.mark.usefixtures("isolated_environment")
def test_sync_missing_credentials() -> None:
    """Test that missing credentials are reported before the workflow runs."""
    workflow = AsyncMock()

    with patch("jira_sync.configuration.cli.run_sync_issues_workflow", new=workflow):
        result = runner.invoke(typer_app, SYNC_ARGUMENTS)

    assert result.exit_code == 1
    assert "Missing required configuration element: GitLab token" in result.output
    workflow.assert_not_called()


@pytest.mark.usefixtures("credentials")
def test_sync_missing_jira_epic() -> None:
    """Test that a missing required option is reported before the workflow runs."""
    workflow = AsyncMock()
    arguments = [argument for argument in SYNC_ARGUMENTS if argument not in ("--jira-epic", "SE-100")]

    with patch("jira_sync.configuration.cli.run_sync_issues_workflow", new=workflow):
        result = runner.invoke(typer_app, arguments)

    assert result.exit_code == 1
    assert "--jira-epic" in result.output
    workflow.assert_not_called()


@pytest.mark.usefixtures("credentials")
def test_sync_invalid_issue_id() -> None:
    """Test that a non-integer issue ID is rejected."""
    workflow = AsyncMock()

    with patch("jira_sync.configuration.cli.run_sync_issues_workflow", new=workflow):
        result = runner.invoke(typer_app, [*SYNC_ARGUMENTS, "-i", "abc"])

    assert result.exit_code == 1
    assert "Invalid issue ID: 'abc'" in result.output
    workflow.assert_not_called()
