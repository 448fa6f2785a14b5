"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import typer
from dotenv import load_dotenv
from gitlab.exceptions import GitlabError
from jira import JIRAError
from requests.exceptions import RequestException
from typer import Option
from typing_extensions import Annotated

from jira_sync.configuration.driver import get_sync_issues_config
from jira_sync.configuration.exceptions import ConfigurationFileNotFoundError, RequiredConfigurationElementError
from jira_sync.synchronize.driver import run_sync_issues_workflow
from jira_sync.synchronize.results import IssueSynchronizationSuccess
from jira_sync.utils.helpers import parse_issue_ids
from jira_sync.utils.logger import configure_logging

load_dotenv()

typer_app = typer.Typer(
    pretty_exceptions_show_locals=False,
    help='Sync GitLab issues to Jira and mark the synced GitLab issues with a "ticket created" label.',
)


def get_version() -> str:
    """Return the installed version of jira-sync."""
    try:
        return version("jira-sync")
    except PackageNotFoundError:
        return "unknown"


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"jira-sync version {get_version()}")
        raise typer.Exit()


def report_synced_issue(result: IssueSynchronizationSuccess) -> None:
    """Print the confirmation line for a synchronized issue."""
    typer.echo(f"Jira issue {result.jira_ticket_key} is created from {result.gitlab_issue.iid}")


@typer_app.command(name="sync")
def sync_issues_cli(
    gitlab_project: Annotated[str | None, Option(envvar="GITLAB_PROJECT", help="GitLab project name (ex: group/project).")] = None,
    gitlab_issue: Annotated[
        list[str] | None,
        Option("--gitlab-issue", "-i", envvar="GITLAB_ISSUE", help="GitLab issue IDs, repeated or comma-separated (ex: -i 5 -i 9,2)."),
    ] = None,
    jira_project: Annotated[str | None, Option(envvar="JIRA_PROJECT", help="Jira project key (ex: SE).")] = None,
    jira_epic: Annotated[str | None, Option(envvar="JIRA_EPIC", help="Jira epic key (ex: SE-1234).")] = None,
    jira_account: Annotated[str | None, Option(envvar="JIRA_ACCOUNT", help="Jira account key (ex: ABC).")] = None,
    link_as_description: Annotated[
        bool, Option(envvar="LINK_AS_DESCRIPTION", help="Use the GitLab issue link as the description of the Jira ticket.")
    ] = False,
    continue_on_error: Annotated[
        bool, Option(envvar="CONTINUE_ON_ERROR", help="Keep processing the remaining issues after an issue fails.")
    ] = False,
    config: Annotated[Path | None, Option(envvar="JIRA_SYNC_CONFIG", help="Config file (default is $HOME/.jira-sync.toml).")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
    show_version: Annotated[
        bool, Option("--version", callback=version_callback, is_eager=True, help="Show command version.")
    ] = False,
) -> None:
    """Create one Jira story per GitLab issue and label each synced GitLab issue."""
    configure_logging(debug=debug)

    try:
        issue_ids = parse_issue_ids(gitlab_issue or [])
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    try:
        sync_config = get_sync_issues_config(
            debug=debug,
            config_file=config,
            gitlab_project=gitlab_project,
            gitlab_issue_ids=issue_ids,
            jira_project=jira_project,
            jira_epic=jira_epic,
            jira_account=jira_account,
            link_as_description=link_as_description,
            continue_on_error=continue_on_error,
        )
    except (ConfigurationFileNotFoundError, RequiredConfigurationElementError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    if sync_config.debug and not debug:
        configure_logging(debug=True)

    try:
        result = asyncio.run(run_sync_issues_workflow(sync_config, on_issue_synced=report_synced_issue))
    except (GitlabError, JIRAError, RequestException) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    failures = result.issue_synchronization_results.failed
    if failures:
        typer.echo("Error(s) encountered while syncing issues:", err=True)
        for failure in failures:
            message = f"GitLab issue {failure.gitlab_issue.iid} failed at step {failure.step.value}: {failure.error}"
            if failure.jira_ticket_key is not None:
                message += f" (Jira issue {failure.jira_ticket_key} was created)"
            typer.echo(message, err=True)
        not_attempted = result.issue_synchronization_results.not_attempted
        if not_attempted:
            typer.echo("Not attempted: " + ", ".join(str(issue.iid) for issue in not_attempted), err=True)
        sys.exit(1)


def main() -> None:
    """Entry point for the jira-sync console script."""
    typer_app()


if __name__ == "__main__":
    main()
