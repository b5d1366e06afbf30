"""Finds and opens the pull request carrying a platform version update."""

from typing import Any

import structlog

from quarkus_platform_updater.github.abc import GitHubClientBase
from quarkus_platform_updater.utils.constants import DEFAULT_PULL_REQUEST_PAGE_SIZE
from quarkus_platform_updater.utils.github import build_head_reference

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def pull_request_with_title_exists(
    github_adapter: GitHubClientBase,
    title: str,
    per_page: int = DEFAULT_PULL_REQUEST_PAGE_SIZE,
) -> bool:
    """Return True if an open pull request titled exactly title exists.

    Pages are requested one at a time. The scan stops at the first match, or
    after the first page holding fewer than per_page pull requests.
    """
    page = 1
    while True:
        pull_requests = await github_adapter.list_pull_requests_page(state="open", per_page=per_page, page=page)
        for pull_request in pull_requests:
            if pull_request.title == title:
                logger.info("Found open pull request with matching title", title=title, number=pull_request.number, page=page)
                return True
        if len(pull_requests) < per_page:
            logger.debug("No open pull request with matching title", title=title, pages_scanned=page)
            return False
        page += 1


async def open_update_pull_request(
    github_adapter: GitHubClientBase,
    title: str,
    branch_name: str,
    base_branch: str,
) -> Any:
    """Open a pull request from branch_name into base_branch, using title as the body too."""
    head = build_head_reference(github_adapter.owner, branch_name)
    pull_request = await github_adapter.create_pull_request(title=title, head=head, base=base_branch, body=title)
    logger.info(
        "Created pull request",
        title=title,
        head=head,
        base=base_branch,
        number=pull_request.number,
        url=pull_request.html_url,
    )
    return pull_request
