"""Version control operations implemented with the git command line."""

from collections.abc import Sequence
from pathlib import Path

from quarkus_platform_updater.tooling.abc import VersionControlBase
from quarkus_platform_updater.tooling.commands import run_command


class GitCLI(VersionControlBase):
    """Runs git in a local working copy, one command per operation."""

    def __init__(self, repo_path: Path = Path(".")) -> None:
        """Initialize with the path of the working copy."""
        self.repo_path = repo_path

    def _git(self, step: str, *args: str) -> None:
        run_command(step, ["git", *args], cwd=self.repo_path)

    def configure_identity(self, name: str, email: str) -> None:
        """Set user.email and user.name in the repository configuration."""
        self._git("configure-identity", "config", "user.email", email)
        self._git("configure-identity", "config", "user.name", name)

    def create_branch(self, branch_name: str) -> None:
        """Create and check out branch_name."""
        self._git("create-branch", "checkout", "-b", branch_name)

    def add(self, paths: Sequence[str]) -> None:
        """Stage paths."""
        self._git("stage", "add", "--", *paths)

    def commit(self, message: str) -> None:
        """Commit staged changes with message."""
        self._git("commit", "commit", "-m", message)

    def push(self, branch_name: str, remote: str = "origin", set_upstream: bool = True) -> None:
        """Push branch_name to remote, optionally recording it as upstream."""
        args = ["push"]
        if set_upstream:
            args.append("--set-upstream")
        self._git("push", *args, remote, branch_name)
