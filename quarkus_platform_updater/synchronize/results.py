"""Contains results of the update-platform workflow."""

from enum import Enum

from pydantic import BaseModel


class UpdatePlatformStatus(str, Enum):
    """How a run of the update-platform workflow ended."""

    UP_TO_DATE = "up_to_date"
    PULL_REQUEST_EXISTS = "pull_request_exists"
    DRY_RUN = "dry_run"
    CREATED = "created"


class UpdatePlatformResult(BaseModel):
    """Result of one run of the update-platform workflow."""

    status: UpdatePlatformStatus
    version: str
    pinned_versions: dict[str, str]
    branch_name: str | None = None
    pull_request_url: str | None = None
