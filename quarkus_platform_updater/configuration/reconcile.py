"""Reconciles configuration between CLI arguments and environment variables.

A value given on the command line wins over the environment (or .env file),
which wins over the built-in default.
"""

from pathlib import Path

from quarkus_platform_updater.configuration.env import settings
from quarkus_platform_updater.configuration.exceptions import RequiredConfigurationElementError
from quarkus_platform_updater.configuration.models import CommitterIdentity, UpdatePlatformConfig
from quarkus_platform_updater.utils.constants import (
    DEFAULT_BASE_BRANCH,
    DEFAULT_COMMITTER_EMAIL,
    DEFAULT_COMMITTER_NAME,
    DEFAULT_DESCRIPTOR_PATHS,
    DEFAULT_GENERATED_FILE,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_PULL_REQUEST_PAGE_SIZE,
    DEFAULT_REMOTE,
    MAX_PULL_REQUEST_PAGE_SIZE,
    PLATFORM_VERSION_PROPERTY,
)
from quarkus_platform_updater.utils.github import split_repository_in_configuration


def reconcile_update_platform_configuration(
    cli_debug: bool = False,
    cli_dry_run: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_token: str | None = None,
    cli_repo: str | None = None,
    cli_platforms_api_url: str | None = None,
    cli_http_timeout: float | None = DEFAULT_HTTP_TIMEOUT,
    cli_repo_path: Path = Path("."),
    cli_descriptor_paths: list[str] | None = None,
    cli_property_name: str = PLATFORM_VERSION_PROPERTY,
    cli_generated_file: str = DEFAULT_GENERATED_FILE,
    cli_base_branch: str = DEFAULT_BASE_BRANCH,
    cli_remote: str = DEFAULT_REMOTE,
    cli_pull_request_page_size: int = DEFAULT_PULL_REQUEST_PAGE_SIZE,
    cli_committer_name: str = DEFAULT_COMMITTER_NAME,
    cli_committer_email: str = DEFAULT_COMMITTER_EMAIL,
) -> UpdatePlatformConfig:
    """Reconcile the update-platform configuration.

    Raises:
        RequiredConfigurationElementError: If no GitHub token or repository is configured.
        ValueError: If the repository is not in 'owner/repo' format or the page size is outside 1..100.
    """
    github_token = cli_github_token or settings.GITHUB_TOKEN
    if not github_token:
        raise RequiredConfigurationElementError(name="GitHub token", cli_name="--github-token", env_name="GITHUB_TOKEN")

    repo = cli_repo or settings.GITHUB_REPOSITORY
    if not repo:
        raise RequiredConfigurationElementError(name="GitHub repository", cli_name="--repo", env_name="GITHUB_REPOSITORY")
    # Fail fast on a malformed slug before anything touches the network.
    split_repository_in_configuration(repo)

    if not 1 <= cli_pull_request_page_size <= MAX_PULL_REQUEST_PAGE_SIZE:
        raise ValueError(
            f"Pull request page size must be between 1 and {MAX_PULL_REQUEST_PAGE_SIZE}, got {cli_pull_request_page_size}"
        )

    return UpdatePlatformConfig(
        repo=repo,
        github_token=github_token,
        debug=cli_debug or settings.DEBUG,
        dry_run=cli_dry_run,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        platforms_api_url=cli_platforms_api_url or settings.PLATFORMS_API_URL,
        http_timeout=cli_http_timeout if cli_http_timeout else None,
        repo_path=cli_repo_path,
        descriptor_paths=list(cli_descriptor_paths) if cli_descriptor_paths else list(DEFAULT_DESCRIPTOR_PATHS),
        property_name=cli_property_name,
        generated_file=cli_generated_file,
        base_branch=cli_base_branch,
        remote=cli_remote,
        pull_request_page_size=cli_pull_request_page_size,
        committer=CommitterIdentity(name=cli_committer_name, email=cli_committer_email),
    )
