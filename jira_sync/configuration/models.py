"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field

DEFAULT_JIRA_EPIC_FIELD_ID = "customfield_10006"
DEFAULT_JIRA_ACCOUNT_FIELD_ID = "customfield_10011"


@dataclass(frozen=True)
class JiraCustomFieldIds:
    """Identifiers of the Jira custom fields populated on every created ticket.

    These are specific to a Jira instance, so they are supplied through
    configuration rather than discovered at runtime.
    """

    epic: str = DEFAULT_JIRA_EPIC_FIELD_ID
    account: str = DEFAULT_JIRA_ACCOUNT_FIELD_ID


@dataclass(frozen=True)
class BaseConfig:
    """Configuration class for the jira-sync CLI."""

    debug: bool
    gitlab_url: str
    gitlab_token: str
    jira_url: str
    jira_username: str | None
    jira_password: str | None
    jira_custom_field_ids: JiraCustomFieldIds = field(default_factory=JiraCustomFieldIds)


@dataclass(frozen=True)
class SyncIssuesConfig(BaseConfig):
    """Configuration class for a single synchronization run."""

    gitlab_project: str = ""
    gitlab_issue_ids: tuple[int, ...] = ()
    jira_project: str = ""
    jira_epic: str = ""
    jira_account: str = ""
    link_as_description: bool = False
    continue_on_error: bool = False
