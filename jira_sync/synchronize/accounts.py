"""Contains resolution logic for Tempo billing accounts."""

import structlog

from jira_sync.configuration.exceptions import RequiredConfigurationElementError
from jira_sync.trackers.abc import TargetTrackerBase

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def resolve_account_id(jira_adapter: TargetTrackerBase, account_key: str) -> int:
    """Resolve a Tempo account key to its numeric account ID.

    A blank key is a configuration error and is reported before any request
    is sent. Lookup errors from Jira propagate unchanged.
    """
    if not account_key or not account_key.strip():
        raise RequiredConfigurationElementError(name="Jira account key", cli_name="--jira-account", env_name="JIRA_ACCOUNT")

    logger.info("Resolving Jira account", account_key=account_key)
    account = await jira_adapter.get_account(account_key)
    logger.info("Resolved Jira account", account_key=account_key, account_id=account.id)
    return account.id
