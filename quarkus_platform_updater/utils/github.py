"""Contains utility functions for GitHub interactions."""


def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository slug in the configuration into owner and repository."""
    if repo is None:
        raise ValueError("A repository slug (owner/repo) is required in config.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Repository must be in the format 'owner/repo' with no extra parts, got '{repo}'.")
    owner, repository = parts
    return owner, repository


def build_head_reference(owner: str, branch_name: str) -> str:
    """Build the 'owner:branch' head reference GitHub expects when opening a pull request."""
    return f"{owner}:{branch_name}"
