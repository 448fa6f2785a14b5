"""Contains rendering logic for Jira ticket descriptions."""

from functools import lru_cache
from pathlib import Path

import jinja2
import structlog

from jira_sync.schemas.issues import GitLabIssueModel
from jira_sync.utils.constants import JIRA_DESCRIPTION_TEMPLATE_NAME

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

TEMPLATES_DIRECTORY = Path(__file__).parent.parent / "templates"


@lru_cache(maxsize=1)
def get_description_environment() -> jinja2.Environment:
    """Jinja2 environment loading the packaged ticket templates.

    Templates produce Jira wiki markup, so nothing is autoescaped and issue
    text is embedded verbatim. Unknown variables are errors.
    """
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(TEMPLATES_DIRECTORY, encoding="utf-8"),
        undefined=jinja2.StrictUndefined,
        autoescape=False,
    )


def render_jira_description(gitlab_issue: GitLabIssueModel, link_as_description: bool) -> str:
    """Render the description of the Jira ticket created for a GitLab issue.

    With ``link_as_description`` the description is the GitLab issue URL.
    Otherwise it is the standard ticket write-up embedding the GitLab
    description and URL verbatim.
    """
    if link_as_description:
        return gitlab_issue.web_url
    template = get_description_environment().get_template(JIRA_DESCRIPTION_TEMPLATE_NAME)
    try:
        return template.render(gitlab_issue.model_dump())
    except jinja2.UndefinedError as exc:
        logger.error("Failed to render Jira description", issue_iid=gitlab_issue.iid, template=template.name, error=str(exc))
        raise
