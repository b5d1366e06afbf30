"""Fetches the latest Quarkus platform version from the platforms API."""

import httpx
import structlog
from pydantic import ValidationError

from quarkus_platform_updater.platforms.exceptions import UnexpectedPlatformsResponseError
from quarkus_platform_updater.platforms.models import PlatformRelease, PlatformsResponse

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def parse_platforms_response(url: str, content: bytes | str) -> PlatformsResponse:
    """Decode the raw body of the platforms API into typed models."""
    try:
        return PlatformsResponse.model_validate_json(content)
    except ValidationError as exc:
        raise UnexpectedPlatformsResponseError(url, str(exc)) from exc


def select_latest_release(url: str, response: PlatformsResponse) -> PlatformRelease:
    """Pick the first release of the first stream of the first platform."""
    if not response.platforms:
        raise UnexpectedPlatformsResponseError(url, "no platforms listed")
    platform = response.platforms[0]
    if not platform.streams:
        raise UnexpectedPlatformsResponseError(url, "first platform has no streams")
    stream = platform.streams[0]
    if not stream.releases:
        raise UnexpectedPlatformsResponseError(url, "first stream has no releases")
    return stream.releases[0]


async def fetch_latest_platform_version(http_client: httpx.AsyncClient, url: str) -> str:
    """Return the Quarkus core version of the most recent platform release.

    Args:
        http_client: Client used for the request; its timeout applies.
        url: Address of the platforms API.

    Raises:
        httpx.HTTPError: If the request fails or the API answers with an error status.
        UnexpectedPlatformsResponseError: If the body is not JSON of the expected shape.
    """
    logger.debug("Requesting platforms", url=url)
    response = await http_client.get(url)
    response.raise_for_status()
    release = select_latest_release(url, parse_platforms_response(url, response.content))
    logger.info("Fetched latest platform version", url=url, version=release.quarkus_core_version)
    return release.quarkus_core_version
