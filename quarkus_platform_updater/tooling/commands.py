"""Runs external commands with the caller's standard streams."""

import subprocess
from pathlib import Path

import structlog

from quarkus_platform_updater.tooling.exceptions import ExternalCommandError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def run_command(step: str, command: list[str], cwd: Path | None = None) -> None:
    """Run command to completion, raising ExternalCommandError on a non-zero exit code."""
    logger.info("Running command", step=step, command=" ".join(command), cwd=str(cwd) if cwd else None)
    result = subprocess.run(command, cwd=cwd, check=False)
    if result.returncode != 0:
        logger.error("Command failed", step=step, command=" ".join(command), returncode=result.returncode)
        raise ExternalCommandError(step, command, result.returncode)
