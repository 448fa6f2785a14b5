"""Contains mapping logic from GitLab issues to Jira ticket requests."""

from jira_sync.configuration.models import JiraCustomFieldIds
from jira_sync.schemas.issues import GitLabIssueModel, JiraTicketRequestModel
from jira_sync.utils.constants import JIRA_TICKET_ISSUE_TYPE


def build_jira_ticket_request(
    gitlab_issue: GitLabIssueModel,
    description: str,
    jira_project: str,
    jira_epic: str,
    account_id: int,
    custom_field_ids: JiraCustomFieldIds,
) -> JiraTicketRequestModel:
    """Build the Jira ticket creation request for a GitLab issue.

    Field lengths and other Jira constraints are not checked here; Jira
    reports them when the ticket is created.
    """
    return JiraTicketRequestModel(
        issue_type=JIRA_TICKET_ISSUE_TYPE,
        project_key=jira_project,
        summary=gitlab_issue.title,
        description=description,
        custom_fields={
            custom_field_ids.epic: jira_epic,
            custom_field_ids.account: str(account_id),
        },
    )
