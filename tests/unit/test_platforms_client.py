"""Contains unit tests for the platforms.client module."""

import json

import httpx
import pytest

from quarkus_platform_updater.platforms.client import fetch_latest_platform_version, parse_platforms_response, select_latest_release
from quarkus_platform_updater.platforms.exceptions import UnexpectedPlatformsResponseError
from quarkus_platform_updater.utils.constants import DEFAULT_PLATFORMS_API_URL
from tests.unit.utils import make_http_client

URL = DEFAULT_PLATFORMS_API_URL


@pytest.mark.asyncio
async def test_fetch_latest_platform_version() -> None:
    """Test that the first release of the first stream of the first platform is returned."""
    async with make_http_client(version="3.15.1") as client:
        assert await fetch_latest_platform_version(client, URL) == "3.15.1"


@pytest.mark.asyncio
async def test_fetch_requests_the_given_url() -> None:
    """Test that exactly one GET is sent to the configured URL."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"platforms": [{"streams": [{"releases": [{"quarkusCoreVersion": "3.16.0"}]}]}]})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        assert await fetch_latest_platform_version(client, "https://platforms.example.com/api/platforms") == "3.16.0"

    assert len(requests) == 1
    assert requests[0].method == "GET"
    assert str(requests[0].url) == "https://platforms.example.com/api/platforms"


@pytest.mark.asyncio
async def test_fetch_raises_on_error_status() -> None:
    """Test that an error status propagates as an httpx error."""
    async with make_http_client(status_code=503, body=b"unavailable") as client:
        with pytest.raises(httpx.HTTPStatusError):
            await fetch_latest_platform_version(client, URL)


@pytest.mark.asyncio
async def test_fetch_raises_on_malformed_json() -> None:
    """Test that a body that is not JSON is reported as an unexpected response."""
    async with make_http_client(body=b"{not json") as client:
        with pytest.raises(UnexpectedPlatformsResponseError) as exc_info:
            await fetch_latest_platform_version(client, URL)

    assert exc_info.value.url == URL


@pytest.mark.parametrize(
    "payload",
    [
        pytest.param({}, id="missing platforms"),
        pytest.param({"platforms": "3.15.1"}, id="platforms not a list"),
        pytest.param({"platforms": [{"streams": [{"releases": [{"version": "3.15.1"}]}]}]}, id="missing core version"),
        pytest.param({"platforms": [{"streams": [{"releases": [{"quarkusCoreVersion": ""}]}]}]}, id="empty core version"),
    ],
)
def test_parse_rejects_unexpected_shapes(payload: dict) -> None:
    """Test that schema mismatches raise UnexpectedPlatformsResponseError."""
    with pytest.raises(UnexpectedPlatformsResponseError):
        parse_platforms_response(URL, json.dumps(payload))


@pytest.mark.parametrize(
    "payload,reason",
    [
        pytest.param({"platforms": []}, "no platforms", id="no platforms"),
        pytest.param({"platforms": [{"streams": []}]}, "no streams", id="no streams"),
        pytest.param({"platforms": [{"streams": [{"releases": []}]}]}, "no releases", id="no releases"),
    ],
)
def test_select_latest_release_rejects_empty_arrays(payload: dict, reason: str) -> None:
    """Test that empty arrays raise instead of failing with an index error."""
    response = parse_platforms_response(URL, json.dumps(payload))
    with pytest.raises(UnexpectedPlatformsResponseError, match=reason):
        select_latest_release(URL, response)


def test_parse_ignores_unknown_fields() -> None:
    """Test that extra fields in the payload are ignored."""
    payload = {
        "platforms": [
            {
                "platformKey": "io.quarkus.platform",
                "streams": [{"id": "3.15", "lts": False, "releases": [{"version": "3.15.1", "quarkusCoreVersion": "3.15.1", "upstreamQuarkusCoreVersion": "3.15.1"}]}],
            }
        ]
    }
    response = parse_platforms_response(URL, json.dumps(payload))
    assert select_latest_release(URL, response).quarkus_core_version == "3.15.1"
