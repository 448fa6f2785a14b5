"""Reconcile configuration between CLI arguments and application settings."""

from pathlib import Path
from typing import Sequence

import structlog

from jira_sync.configuration.env import Settings, default_config_file, load_settings
from jira_sync.configuration.exceptions import ConfigurationFileNotFoundError, RequiredConfigurationElementError
from jira_sync.configuration.models import JiraCustomFieldIds, SyncIssuesConfig

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def reconcile_settings(config_file: Path | None) -> Settings:
    """Load application settings from the environment and the TOML configuration file.

    Args:
        config_file (Path | None): Explicit configuration file path. When None,
            the default file in the user's home directory is used if present.

    Raises:
        ConfigurationFileNotFoundError: If an explicit configuration file does not exist.

    Returns:
        Settings: The loaded settings.
    """
    if config_file is not None and not config_file.is_file():
        raise ConfigurationFileNotFoundError(config_file)

    settings = load_settings(config_file)
    used_config_file = config_file if config_file is not None else default_config_file()
    if used_config_file.is_file():
        logger.info("Using config file", config_file=str(used_config_file))
    return settings


async def require_configuration_element(value: str | None, name: str, cli_name: str, env_name: str) -> str:
    """Return a configuration value, raising if it is missing or blank."""
    if value is None or not value.strip():
        raise RequiredConfigurationElementError(name=name, cli_name=cli_name, env_name=env_name)
    return value


async def reconcile_sync_issues_configuration(
    cli_debug: bool,
    cli_config_file: Path | None,
    cli_gitlab_project: str | None,
    cli_gitlab_issue_ids: Sequence[int] | None,
    cli_jira_project: str | None,
    cli_jira_epic: str | None,
    cli_jira_account: str | None,
    cli_link_as_description: bool = False,
    cli_continue_on_error: bool = False,
) -> SyncIssuesConfig:
    """Reconciles the configuration for a synchronization run.

    Every required element is checked here so that a misconfigured run
    fails before any request is sent to GitLab or Jira.

    Raises:
        ConfigurationFileNotFoundError: If an explicit configuration file does not exist.
        RequiredConfigurationElementError: If a required configuration element is missing.

    Returns:
        SyncIssuesConfig: The immutable configuration for the run.
    """
    settings = await reconcile_settings(cli_config_file)

    gitlab_token = await require_configuration_element(settings.gitlab_token, "GitLab token", "config file key gitlab_token", "GITLAB_TOKEN")
    jira_url = await require_configuration_element(settings.jira_url, "Jira URL", "config file key jira_url", "JIRA_URL")
    gitlab_project = await require_configuration_element(cli_gitlab_project, "GitLab project", "--gitlab-project", "GITLAB_PROJECT")
    if not cli_gitlab_issue_ids:
        raise RequiredConfigurationElementError(name="GitLab issue IDs", cli_name="--gitlab-issue", env_name="GITLAB_ISSUE")
    jira_project = await require_configuration_element(cli_jira_project, "Jira project key", "--jira-project", "JIRA_PROJECT")
    jira_epic = await require_configuration_element(cli_jira_epic, "Jira epic key", "--jira-epic", "JIRA_EPIC")
    jira_account = await require_configuration_element(cli_jira_account, "Jira account key", "--jira-account", "JIRA_ACCOUNT")

    return SyncIssuesConfig(
        debug=cli_debug or settings.debug,
        gitlab_url=settings.gitlab_url,
        gitlab_token=gitlab_token,
        jira_url=jira_url,
        jira_username=settings.jira_username,
        jira_password=settings.jira_password,
        jira_custom_field_ids=JiraCustomFieldIds(
            epic=settings.jira_epic_field_id,
            account=settings.jira_account_field_id,
        ),
        gitlab_project=gitlab_project,
        gitlab_issue_ids=tuple(cli_gitlab_issue_ids),
        jira_project=jira_project,
        jira_epic=jira_epic,
        jira_account=jira_account,
        link_as_description=cli_link_as_description,
        continue_on_error=cli_continue_on_error,
    )
