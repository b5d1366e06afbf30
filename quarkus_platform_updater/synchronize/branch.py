"""Publishes the branch carrying updated descriptors."""

from collections.abc import Sequence

import structlog

from quarkus_platform_updater.configuration.models import CommitterIdentity
from quarkus_platform_updater.tooling.abc import BuildToolBase, VersionControlBase

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def publish_update_branch(
    vcs: VersionControlBase,
    build_tool: BuildToolBase,
    branch_name: str,
    commit_message: str,
    descriptor_paths: Sequence[str],
    generated_file: str,
    committer: CommitterIdentity,
    remote: str = "origin",
) -> None:
    """Create a branch holding the descriptor update and push it.

    The derived file is regenerated after switching branches so that it is
    committed together with the descriptors. The first failing step raises;
    nothing is undone.
    """
    vcs.configure_identity(committer.name, committer.email)
    vcs.create_branch(branch_name)
    build_tool.generate(generated_file)
    vcs.add([*descriptor_paths, generated_file])
    vcs.commit(commit_message)
    vcs.push(branch_name, remote=remote, set_upstream=True)
    logger.info("Published branch", branch=branch_name, remote=remote)
