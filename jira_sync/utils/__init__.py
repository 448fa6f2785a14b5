"""Utility modules for shared functionality."""

from .constants import (
    JIRA_DESCRIPTION_TEMPLATE_NAME,
    JIRA_TICKET_ISSUE_TYPE,
    TICKET_CREATED_LABEL,
)
from .helpers import parse_issue_ids

__all__ = [
    "JIRA_DESCRIPTION_TEMPLATE_NAME",
    "JIRA_TICKET_ISSUE_TYPE",
    "TICKET_CREATED_LABEL",
    "parse_issue_ids",
]
