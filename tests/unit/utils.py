"""Utility functions for unit tests."""

from jira_sync.schemas.issues import GitLabIssueModel


def make_gitlab_issue(iid: int, title: str | None = None, description: str | None = None) -> GitLabIssueModel:
    """Build a GitLab issue model with predictable field values."""
    return GitLabIssueModel(
        iid=iid,
        title=title if title is not None else f"Issue {iid}",
        description=description if description is not None else f"Description of issue {iid}",
        web_url=f"https://gitlab.example.com/group/project/-/issues/{iid}",
        labels=[],
    )
