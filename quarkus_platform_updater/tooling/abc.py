"""Base ABCs for the local tools used to publish a branch."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class VersionControlBase(ABC):
    """Base ABC for version control operations on the local working copy."""

    @abstractmethod
    def configure_identity(self, name: str, email: str) -> None:
        """Set the committer name and email used for new commits."""
        pass

    @abstractmethod
    def create_branch(self, branch_name: str) -> None:
        """Create a branch from the current HEAD and switch to it."""
        pass

    @abstractmethod
    def add(self, paths: Sequence[str]) -> None:
        """Stage the given paths."""
        pass

    @abstractmethod
    def commit(self, message: str) -> None:
        """Commit the staged changes."""
        pass

    @abstractmethod
    def push(self, branch_name: str, remote: str = "origin", set_upstream: bool = True) -> None:
        """Push a branch to a remote."""
        pass


class BuildToolBase(ABC):
    """Base ABC for the build tool that regenerates derived files."""

    @abstractmethod
    def generate(self, target: str) -> None:
        """Build target so that the derived file it names is up to date."""
        pass
