"""Sets up the authenticated githubkit client."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy]


def get_github_token_client(github_token: str, github_api_url: str) -> GitHubClient:
    """Returns a GitHub client authenticated with a token.

    Supports a custom base URL for GitHub Enterprise Server (GHES).
    """
    # Disable HTTP caching so pull request listings are always fresh
    return GitHub(auth=TokenAuthStrategy(github_token), base_url=github_api_url, http_cache=False)
