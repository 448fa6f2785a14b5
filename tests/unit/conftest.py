"""Fixtures for unit tests."""

from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock

import pytest
import structlog

from jira_sync.configuration.models import JiraCustomFieldIds
from jira_sync.schemas.issues import JiraAccountModel, JiraTicketModel
from jira_sync.trackers.abc import SourceTrackerBase, TargetTrackerBase

from .utils import make_gitlab_issue


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def custom_field_ids() -> JiraCustomFieldIds:
    """Default Jira custom field identifiers."""
    return JiraCustomFieldIds()


@pytest.fixture
def jira_adapter() -> AsyncMock:
    """A Jira adapter whose created tickets are keyed SE-1, SE-2, ..."""
    adapter = AsyncMock(spec=TargetTrackerBase)
    adapter.get_account.return_value = JiraAccountModel(id=7, key="ABC")
    adapter.create_issue.side_effect = [JiraTicketModel(key=f"SE-{n}") for n in range(1, 100)]
    return adapter


@pytest.fixture
def gitlab_adapter() -> AsyncMock:
    """A GitLab adapter that returns issues built by make_gitlab_issue."""
    adapter = AsyncMock(spec=SourceTrackerBase)
    adapter.get_issue.side_effect = make_gitlab_issue
    adapter.add_issue_labels.return_value = {}
    return adapter


SETTINGS_ENVIRONMENT_VARIABLES = [
    "DEBUG",
    "GITLAB_URL",
    "GITLAB_TOKEN",
    "JIRA_URL",
    "JIRA_USERNAME",
    "JIRA_PASSWORD",
    "JIRA_EPIC_FIELD_ID",
    "JIRA_ACCOUNT_FIELD_ID",
    "GITLAB_PROJECT",
    "GITLAB_ISSUE",
    "JIRA_PROJECT",
    "JIRA_EPIC",
    "JIRA_ACCOUNT",
    "LINK_AS_DESCRIPTION",
    "CONTINUE_ON_ERROR",
    "JIRA_SYNC_CONFIG",
]


@pytest.fixture
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear settings from the environment and point the home directory at an empty directory."""
    for name in SETTINGS_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return home
