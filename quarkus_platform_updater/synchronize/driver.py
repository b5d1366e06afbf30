"""Orchestrates the update of the pinned Quarkus platform version."""

import httpx
import structlog

from quarkus_platform_updater.configuration.models import UpdatePlatformConfig
from quarkus_platform_updater.descriptors.pom import read_platform_version, update_platform_version
from quarkus_platform_updater.github.abc import GitHubClientBase
from quarkus_platform_updater.platforms.client import fetch_latest_platform_version
from quarkus_platform_updater.synchronize.branch import publish_update_branch
from quarkus_platform_updater.synchronize.pull_requests import open_update_pull_request, pull_request_with_title_exists
from quarkus_platform_updater.synchronize.results import UpdatePlatformResult, UpdatePlatformStatus
from quarkus_platform_updater.synchronize.versions import is_up_to_date
from quarkus_platform_updater.tooling.abc import BuildToolBase, VersionControlBase
from quarkus_platform_updater.utils.helpers import generate_branch_name, generate_pull_request_title

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_update_platform_workflow(
    config: UpdatePlatformConfig,
    http_client: httpx.AsyncClient,
    github_adapter: GitHubClientBase,
    vcs: VersionControlBase,
    build_tool: BuildToolBase,
) -> UpdatePlatformResult:
    """Run the update-platform workflow.

    The steps run strictly in order: fetch the latest version, read the pinned
    versions, stop if they all match, stop if the update pull request is
    already open, rewrite the descriptors, publish the branch and open the pull
    request. Any failure propagates to the caller; descriptors already
    rewritten stay rewritten.
    """
    latest_version = await fetch_latest_platform_version(http_client, config.platforms_api_url)
    title = generate_pull_request_title(latest_version)
    branch_name = generate_branch_name(latest_version)

    descriptor_files = config.descriptor_files()
    pinned_versions = {str(path): read_platform_version(path, config.property_name) for path in descriptor_files}

    if is_up_to_date(latest_version, pinned_versions.values()):
        logger.info("Quarkus platform is up-to-date", version=latest_version)
        return UpdatePlatformResult(status=UpdatePlatformStatus.UP_TO_DATE, version=latest_version, pinned_versions=pinned_versions)

    logger.info("Quarkus platform is stale", latest_version=latest_version, pinned_versions=pinned_versions)

    if await pull_request_with_title_exists(github_adapter, title, per_page=config.pull_request_page_size):
        return UpdatePlatformResult(
            status=UpdatePlatformStatus.PULL_REQUEST_EXISTS,
            version=latest_version,
            pinned_versions=pinned_versions,
            branch_name=branch_name,
        )

    if config.dry_run:
        logger.info(
            "Dry run - skipping descriptor update, branch and pull request",
            version=latest_version,
            branch=branch_name,
            title=title,
            base=config.base_branch,
        )
        return UpdatePlatformResult(
            status=UpdatePlatformStatus.DRY_RUN,
            version=latest_version,
            pinned_versions=pinned_versions,
            branch_name=branch_name,
        )

    for path in descriptor_files:
        update_platform_version(path, latest_version, config.property_name)

    publish_update_branch(
        vcs=vcs,
        build_tool=build_tool,
        branch_name=branch_name,
        commit_message=title,
        descriptor_paths=config.descriptor_paths,
        generated_file=config.generated_file,
        committer=config.committer,
        remote=config.remote,
    )

    pull_request = await open_update_pull_request(github_adapter, title, branch_name, config.base_branch)
    return UpdatePlatformResult(
        status=UpdatePlatformStatus.CREATED,
        version=latest_version,
        pinned_versions=pinned_versions,
        branch_name=branch_name,
        pull_request_url=pull_request.html_url,
    )
