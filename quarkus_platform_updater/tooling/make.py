"""Build tool implementation backed by make."""

from pathlib import Path

from quarkus_platform_updater.tooling.abc import BuildToolBase
from quarkus_platform_updater.tooling.commands import run_command


class MakeBuildTool(BuildToolBase):
    """Runs make targets in the repository root."""

    def __init__(self, repo_path: Path = Path(".")) -> None:
        """Initialize with the directory holding the Makefile."""
        self.repo_path = repo_path

    def generate(self, target: str) -> None:
        """Run 'make <target>'."""
        run_command("regenerate", ["make", target], cwd=self.repo_path)
