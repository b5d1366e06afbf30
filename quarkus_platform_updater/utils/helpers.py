"""General utility functions and helper classes."""

from quarkus_platform_updater.utils.constants import BRANCH_NAME_PREFIX, PULL_REQUEST_TITLE_TEMPLATE


def generate_pull_request_title(version: str) -> str:
    """Generate the pull request title for a platform version, e.g. 'chore: update Quarkus platform version to 3.15.1'."""
    return PULL_REQUEST_TITLE_TEMPLATE.format(version=version)


def generate_branch_name(version: str, prefix: str = BRANCH_NAME_PREFIX) -> str:
    """Generate a deterministic branch name like 'update-quarkus-platform-3.15.1'."""
    return f"{prefix}-{version}"
