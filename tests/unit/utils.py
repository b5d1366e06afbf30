"""Helpers shared by the unit tests."""

import json
from unittest.mock import MagicMock

import httpx

POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 https://maven.apache.org/xsd/maven-4.0.0.xsd">
  <modelVersion>4.0.0</modelVersion>
  <groupId>org.acme</groupId>
  <artifactId>function</artifactId>
  <version>1.0.0-SNAPSHOT</version>
  <properties>
    <compiler-plugin.version>3.11.0</compiler-plugin.version>
    <quarkus.platform.version>{version}</quarkus.platform.version>
    <surefire-plugin.version>3.0.0</surefire-plugin.version>
  </properties>
</project>
"""


def render_pom(version: str) -> str:
    """Render a minimal Maven POM pinning the given platform version."""
    return POM_TEMPLATE.format(version=version)


def platforms_payload(version: str) -> dict:
    """Build a platforms API body whose newest release has the given core version."""
    return {
        "platforms": [
            {
                "platformKey": "io.quarkus.platform",
                "name": "Quarkus Community Platform",
                "streams": [
                    {
                        "id": "3.15",
                        "releases": [{"version": version, "quarkusCoreVersion": version}],
                    },
                    {
                        "id": "3.14",
                        "releases": [{"version": "3.14.4", "quarkusCoreVersion": "3.14.4"}],
                    },
                ],
            }
        ]
    }


def make_http_client(status_code: int = 200, body: bytes | None = None, version: str = "3.15.1") -> httpx.AsyncClient:
    """Build an httpx client answering every request from memory."""
    content = body if body is not None else json.dumps(platforms_payload(version)).encode("utf-8")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=content, headers={"content-type": "application/json"})

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def make_pull_request(title: str, number: int = 1) -> MagicMock:
    """Build a stand-in for a listed pull request."""
    pull_request = MagicMock()
    pull_request.title = title
    pull_request.number = number
    pull_request.html_url = f"https://github.com/knative/func/pull/{number}"
    return pull_request
