"""Sets up the authenticated GitLab and Jira clients.

Both clients are built without automatic retries: a failed request surfaces
as an error on the first attempt, so a ticket creation is never re-sent.
"""

import gitlab
from jira import JIRA


def get_gitlab_client(gitlab_url: str, gitlab_token: str) -> gitlab.Gitlab:
    """Returns an authenticated GitLab client using a private token."""
    if not gitlab_token:
        raise RuntimeError("GitLab authentication requires gitlab_token in config.")
    return gitlab.Gitlab(gitlab_url, private_token=gitlab_token, retry_transient_errors=False)


def get_jira_client(jira_url: str, jira_username: str | None, jira_password: str | None) -> JIRA:
    """Returns a Jira client, using basic authentication when a username is configured."""
    if not jira_url:
        raise RuntimeError("Jira client requires jira_url in config.")
    if jira_username:
        return JIRA(
            server=jira_url,
            basic_auth=(jira_username, jira_password or ""),
            get_server_info=False,
            max_retries=0,
        )
    return JIRA(server=jira_url, get_server_info=False, max_retries=0)
