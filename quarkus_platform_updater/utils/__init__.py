"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_DESCRIPTOR_PATHS,
    DEFAULT_PLATFORMS_API_URL,
    PLATFORM_VERSION_PROPERTY,
    PULL_REQUEST_TITLE_TEMPLATE,
)
from .helpers import generate_branch_name, generate_pull_request_title
from .retry import retry_on_rate_limit

__all__ = [
    "DEFAULT_DESCRIPTOR_PATHS",
    "DEFAULT_PLATFORMS_API_URL",
    "PLATFORM_VERSION_PROPERTY",
    "PULL_REQUEST_TITLE_TEMPLATE",
    "generate_branch_name",
    "generate_pull_request_title",
    "retry_on_rate_limit",
]
