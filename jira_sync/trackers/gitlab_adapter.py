"""GitLab client adapter for the python-gitlab library."""

import asyncio
from typing import Self

import gitlab
import structlog

from jira_sync.schemas.issues import GitLabIssueModel

from .abc import SourceTrackerBase
from .client import get_gitlab_client

logger = structlog.get_logger(__name__)


class PythonGitLabAdapter(SourceTrackerBase):
    """GitLab client adapter for the python-gitlab library.

    python-gitlab is synchronous, so every call runs in a worker thread. Calls
    are still awaited one at a time by the synchronization workflow. Rate
    limit responses are raised instead of being waited out and retried.
    """

    def __init__(self, client: gitlab.Gitlab, project: str) -> None:
        """Initialize the GitLab client adapter with an already-initialized client."""
        self.client = client
        self.project = project
        self._project_manager = client.projects.get(project, lazy=True)

    @classmethod
    async def create(cls, project: str, gitlab_token: str, gitlab_url: str = "https://gitlab.com") -> Self:
        """Create a new GitLab client adapter for a project.

        Args:
            project: Project ID or path with namespace (e.g. 'group/project')
            gitlab_token: Private or personal access token
            gitlab_url: GitLab instance URL (defaults to https://gitlab.com)

        Returns:
            Configured PythonGitLabAdapter instance
        """
        logger.info("Creating client for GitLab instance and project", gitlab_url=gitlab_url, project=project)
        client = get_gitlab_client(gitlab_url=gitlab_url, gitlab_token=gitlab_token)
        return cls(client, project)

    async def get_issue(self, issue_iid: int) -> GitLabIssueModel:
        """Get an issue of the project by its IID."""
        issue = await asyncio.to_thread(self._project_manager.issues.get, issue_iid, obey_rate_limit=False)
        return GitLabIssueModel(
            iid=issue.iid,
            title=issue.title,
            description=issue.description,
            web_url=issue.web_url,
            labels=list(issue.labels or []),
        )

    async def add_issue_labels(self, issue_iid: int, labels: list[str]) -> dict[str, object]:
        """Add labels to an issue of the project, leaving its other fields untouched."""
        logger.debug("Adding labels to GitLab issue", project=self.project, issue_iid=issue_iid, labels=labels)
        return await asyncio.to_thread(
            self._project_manager.issues.update,
            issue_iid,
            {"add_labels": ",".join(labels)},
            obey_rate_limit=False,
        )
