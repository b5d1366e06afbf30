"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any, Literal


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    owner: str
    repo_name: str

    # Pull Request CRUD
    @abstractmethod
    async def list_pull_requests_page(
        self,
        state: Literal["open", "closed", "all"] = "open",
        per_page: int = 10,
        page: int = 1,
        **kwargs: Any,
    ) -> list[Any]:
        """List a single page of pull requests for a repository."""
        pass

    @abstractmethod
    async def create_pull_request(
        self,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
        draft: bool | None = None,
        maintainer_can_modify: bool | None = None,
        **kwargs: Any,
    ) -> Any:
        """Create a pull request for a repository."""
        pass
