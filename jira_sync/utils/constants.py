"""Shared constants used across the application."""

# Synchronization Constants
# -------------------------

TICKET_CREATED_LABEL = "ticket created"
"""Label added to a GitLab issue once its Jira ticket has been created."""

JIRA_TICKET_ISSUE_TYPE = "Story"
"""Jira issue type of every created ticket."""

JIRA_DESCRIPTION_TEMPLATE_NAME = "jira_issue_description.j2"
"""Jinja2 template used to render Jira ticket descriptions."""
