"""Typed view of the platforms API response.

Only the fields this tool reads are declared; anything else in the payload is
ignored. The API lists platforms, streams and releases newest first.
"""

from pydantic import BaseModel, Field


class PlatformRelease(BaseModel):
    """A single release of a platform stream."""

    quarkus_core_version: str = Field(alias="quarkusCoreVersion", min_length=1)


class PlatformStream(BaseModel):
    """A stream (e.g. 3.15) of a platform and its releases."""

    releases: list[PlatformRelease]


class Platform(BaseModel):
    """A platform published by the directory service."""

    streams: list[PlatformStream]


class PlatformsResponse(BaseModel):
    """Body of GET /api/platforms."""

    platforms: list[Platform]
