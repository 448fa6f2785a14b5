"""Pydantic schemas for GitLab issues and Jira tickets."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class GitLabIssueModel(BaseModel):
    """Pydantic model for a GitLab issue."""

    iid: int
    title: str
    description: str = ""
    web_url: str
    labels: list[str] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def description_none_to_empty(cls, value: Any) -> Any:
        """GitLab reports an issue without a description as null."""
        return "" if value is None else value


class JiraAccountModel(BaseModel):
    """Pydantic model for a Tempo account as returned by the account lookup."""

    id: int
    key: str | None = None
    name: str | None = None


class JiraTicketRequestModel(BaseModel):
    """Pydantic model for a Jira ticket creation request."""

    issue_type: str = "Story"
    project_key: str
    summary: str
    description: str
    custom_fields: dict[str, str] = Field(default_factory=dict)

    def to_fields(self) -> dict[str, Any]:
        """Return the ``fields`` payload expected by the Jira create issue endpoint."""
        fields: dict[str, Any] = {
            "issuetype": {"name": self.issue_type},
            "project": {"key": self.project_key},
            "summary": self.summary,
            "description": self.description,
        }
        fields.update(self.custom_fields)
        return fields


class JiraTicketModel(BaseModel):
    """Pydantic model for a created Jira ticket."""

    key: str
