"""Decides whether the pinned platform versions need updating."""

from collections.abc import Iterable


def is_up_to_date(latest_version: str, pinned_versions: Iterable[str]) -> bool:
    """Return True when every pinned version is exactly latest_version.

    Versions are compared as plain strings: a differently formatted or older
    version counts as stale, and descriptors that disagree are never up to date.
    """
    return all(pinned == latest_version for pinned in pinned_versions)
