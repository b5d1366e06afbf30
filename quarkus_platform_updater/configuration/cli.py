"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path

import httpx
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from quarkus_platform_updater.configuration.env import settings
from quarkus_platform_updater.configuration.models import UpdatePlatformConfig
from quarkus_platform_updater.configuration.reconcile import reconcile_update_platform_configuration
from quarkus_platform_updater.github.adapter import GitHubKitAdapter
from quarkus_platform_updater.synchronize.driver import run_update_platform_workflow
from quarkus_platform_updater.synchronize.results import UpdatePlatformResult, UpdatePlatformStatus
from quarkus_platform_updater.tooling.git import GitCLI
from quarkus_platform_updater.tooling.make import MakeBuildTool
from quarkus_platform_updater.utils.constants import (
    DEFAULT_BASE_BRANCH,
    DEFAULT_COMMITTER_EMAIL,
    DEFAULT_COMMITTER_NAME,
    DEFAULT_GENERATED_FILE,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_PULL_REQUEST_PAGE_SIZE,
    DEFAULT_REMOTE,
    PLATFORM_VERSION_PROPERTY,
)
from quarkus_platform_updater.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Keeps the pinned Quarkus platform version current.")


@typer_app.callback()
def main_callback(
    ctx: typer.Context,
    debug: Annotated[bool, Option("--debug", help="Enable debug logging. Defaults to DEBUG.")] = False,
) -> None:
    """Configure logging for every command."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    configure_logging(debug=debug or settings.DEBUG)


async def run_with_default_collaborators(config: UpdatePlatformConfig) -> UpdatePlatformResult:
    """Build the real clients and tools for config and run the workflow with them."""
    github_adapter = GitHubKitAdapter.create(
        repo=config.repo,
        github_token=config.github_token,
        github_api_url=config.github_api_url,
    )
    async with httpx.AsyncClient(timeout=config.http_timeout, follow_redirects=True) as http_client:
        return await run_update_platform_workflow(
            config=config,
            http_client=http_client,
            github_adapter=github_adapter,
            vcs=GitCLI(config.repo_path),
            build_tool=MakeBuildTool(config.repo_path),
        )


def report_result(result: UpdatePlatformResult) -> None:
    """Echo the outcome of a workflow run."""
    if result.status == UpdatePlatformStatus.UP_TO_DATE:
        typer.echo("Quarkus platform is up-to-date!")
    elif result.status == UpdatePlatformStatus.PULL_REQUEST_EXISTS:
        typer.echo("The PR already exists!")
    elif result.status == UpdatePlatformStatus.DRY_RUN:
        typer.echo(f"Dry run: would update the Quarkus platform to {result.version} on branch '{result.branch_name}'")
    else:
        typer.echo(f"The PR has been created! {result.pull_request_url}")


@typer_app.command(name="update-platform")
def update_platform_cli(
    ctx: typer.Context,
    repo: Annotated[str | None, Option("--repo", help="Repository (owner/repo). Defaults to GITHUB_REPOSITORY.")] = None,
    github_token: Annotated[str | None, Option("--github-token", help="GitHub token. Defaults to GITHUB_TOKEN.")] = None,
    github_api_url: Annotated[str | None, Option("--github-api-url", help="GitHub API URL. Defaults to GITHUB_API_URL.")] = None,
    platforms_api_url: Annotated[str | None, Option("--platforms-api-url", help="Platforms API URL. Defaults to PLATFORMS_API_URL.")] = None,
    http_timeout: Annotated[float, Option("--http-timeout", help="Timeout in seconds for the platforms API, 0 to disable.")] = DEFAULT_HTTP_TIMEOUT,
    repo_path: Annotated[Path, Option("--repo-path", help="Path of the local working copy.")] = Path("."),
    descriptors: Annotated[
        list[str] | None,
        Option("--descriptor", help="Descriptor path relative to the working copy. Repeat for several files."),
    ] = None,
    property_name: Annotated[str, Option("--property", help="Descriptor property pinning the platform version.")] = PLATFORM_VERSION_PROPERTY,
    generated_file: Annotated[str, Option("--generated-file", help="Make target regenerated and committed with the descriptors.")] = DEFAULT_GENERATED_FILE,
    base_branch: Annotated[str, Option("--base-branch", help="Branch the pull request targets.")] = DEFAULT_BASE_BRANCH,
    remote: Annotated[str, Option("--remote", help="Remote the branch is pushed to.")] = DEFAULT_REMOTE,
    page_size: Annotated[int, Option("--page-size", help="Page size when scanning open pull requests (1-100).")] = DEFAULT_PULL_REQUEST_PAGE_SIZE,
    committer_name: Annotated[str, Option("--committer-name", help="Committer name.")] = DEFAULT_COMMITTER_NAME,
    committer_email: Annotated[str, Option("--committer-email", help="Committer email.")] = DEFAULT_COMMITTER_EMAIL,
    dry_run: Annotated[bool, Option("--dry-run", help="Report what would change without writing, pushing or opening a PR.")] = False,
) -> None:
    """Update the pinned Quarkus platform version and open a pull request if it is stale."""
    try:
        config = reconcile_update_platform_configuration(
            cli_debug=ctx.obj["debug"],
            cli_dry_run=dry_run,
            cli_github_api_url=github_api_url,
            cli_github_token=github_token,
            cli_repo=repo,
            cli_platforms_api_url=platforms_api_url,
            cli_http_timeout=http_timeout,
            cli_repo_path=repo_path,
            cli_descriptor_paths=descriptors,
            cli_property_name=property_name,
            cli_generated_file=generated_file,
            cli_base_branch=base_branch,
            cli_remote=remote,
            cli_pull_request_page_size=page_size,
            cli_committer_name=committer_name,
            cli_committer_email=committer_email,
        )
        result = asyncio.run(run_with_default_collaborators(config))
    except Exception as exc:
        typer.echo(f"ERROR: {exc}")
        raise typer.Exit(1) from exc

    report_result(result)
    typer.echo("OK!")


if __name__ == "__main__":
    typer_app()
