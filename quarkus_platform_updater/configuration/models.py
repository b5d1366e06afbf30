"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field
from pathlib import Path

from quarkus_platform_updater.utils.constants import (
    DEFAULT_BASE_BRANCH,
    DEFAULT_COMMITTER_EMAIL,
    DEFAULT_COMMITTER_NAME,
    DEFAULT_DESCRIPTOR_PATHS,
    DEFAULT_GENERATED_FILE,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_PLATFORMS_API_URL,
    DEFAULT_PULL_REQUEST_PAGE_SIZE,
    DEFAULT_REMOTE,
    PLATFORM_VERSION_PROPERTY,
)


@dataclass
class CommitterIdentity:
    """Name and email recorded on the update commit."""

    name: str = DEFAULT_COMMITTER_NAME
    email: str = DEFAULT_COMMITTER_EMAIL


@dataclass
class UpdatePlatformConfig:
    """Configuration class for the update-platform command."""

    repo: str
    github_token: str
    debug: bool = False
    dry_run: bool = False
    github_api_url: str = "https://api.github.com"
    platforms_api_url: str = DEFAULT_PLATFORMS_API_URL
    http_timeout: float | None = DEFAULT_HTTP_TIMEOUT
    repo_path: Path = Path(".")
    descriptor_paths: list[str] = field(default_factory=lambda: list(DEFAULT_DESCRIPTOR_PATHS))
    property_name: str = PLATFORM_VERSION_PROPERTY
    generated_file: str = DEFAULT_GENERATED_FILE
    base_branch: str = DEFAULT_BASE_BRANCH
    remote: str = DEFAULT_REMOTE
    pull_request_page_size: int = DEFAULT_PULL_REQUEST_PAGE_SIZE
    committer: CommitterIdentity = field(default_factory=CommitterIdentity)

    def descriptor_files(self) -> list[Path]:
        """Descriptor paths resolved against the working copy."""
        return [self.repo_path / path for path in self.descriptor_paths]
