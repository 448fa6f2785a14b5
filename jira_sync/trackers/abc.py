"""Base ABCs for issue tracker clients."""

from abc import ABC, abstractmethod
from typing import Any

from jira_sync.schemas.issues import GitLabIssueModel, JiraAccountModel, JiraTicketModel


class SourceTrackerBase(ABC):
    """Base ABC for the tracker that issues are migrated from."""

    @abstractmethod
    async def get_issue(self, issue_iid: int) -> GitLabIssueModel:
        """Get an issue by its project-scoped ID."""
        pass

    @abstractmethod
    async def add_issue_labels(self, issue_iid: int, labels: list[str]) -> Any:
        """Add labels to an issue without removing existing ones."""
        pass


class TargetTrackerBase(ABC):
    """Base ABC for the ticketing system that tickets are created in."""

    @abstractmethod
    async def get_account(self, account_key: str) -> JiraAccountModel:
        """Look up a billing account by its key."""
        pass

    @abstractmethod
    async def create_issue(self, fields: dict[str, Any]) -> JiraTicketModel:
        """Create a ticket from a fields payload."""
        pass
