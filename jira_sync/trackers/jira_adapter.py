"""Jira client adapter for the jira library."""

import asyncio
from urllib.parse import quote
from typing import Any, Self

import structlog
from jira import JIRA

from jira_sync.schemas.issues import JiraAccountModel, JiraTicketModel

from .abc import TargetTrackerBase
from .client import get_jira_client

logger = structlog.get_logger(__name__)

TEMPO_ACCOUNTS_API_PATH = "/rest/tempo-accounts/1"


class JiraAdapter(TargetTrackerBase):
    """Jira client adapter for the jira library, including the Tempo Accounts REST API."""

    def __init__(self, client: JIRA) -> None:
        """Initialize the Jira client adapter with an already-initialized client."""
        self.client = client

    @classmethod
    async def create(cls, jira_url: str, jira_username: str | None = None, jira_password: str | None = None) -> Self:
        """Create a new Jira client adapter.

        Args:
            jira_url: Base URL of the Jira instance
            jira_username: Username for basic authentication
            jira_password: Password or API token for basic authentication

        Returns:
            Configured JiraAdapter instance
        """
        logger.info("Creating client for Jira instance", jira_url=jira_url, jira_username=jira_username)
        client = get_jira_client(jira_url=jira_url, jira_username=jira_username, jira_password=jira_password)
        return cls(client)

    def _tempo_accounts_url(self, path: str) -> str:
        return f"{self.client.server_url.rstrip('/')}{TEMPO_ACCOUNTS_API_PATH}/{path.lstrip('/')}"

    async def get_account(self, account_key: str) -> JiraAccountModel:
        """Look up a Tempo account by its key.

        The Jira session raises ``JIRAError`` for any non-successful response,
        including an unknown account key.
        """
        url = self._tempo_accounts_url(f"account/key/{quote(account_key, safe='')}")
        response = await asyncio.to_thread(self.client._session.get, url)
        return JiraAccountModel.model_validate(response.json())

    async def create_issue(self, fields: dict[str, Any]) -> JiraTicketModel:
        """Create a Jira issue from a fields payload.

        The key comes from the creation response; the new issue is not fetched back.
        """
        issue = await asyncio.to_thread(self.client.create_issue, fields=fields, prefetch=False)
        return JiraTicketModel(key=issue.key)
