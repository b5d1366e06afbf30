"""Fixtures for unit tests."""

from pathlib import Path
from typing import Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from quarkus_platform_updater.tooling.abc import BuildToolBase, VersionControlBase
from tests.unit.utils import make_pull_request, render_pom


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def write_pom() -> Callable[[Path, str], Path]:
    """Return a helper writing a POM that pins version at path."""

    def _write(path: Path, version: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_pom(version), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def github_adapter() -> MagicMock:
    """A GitHub adapter with no open pull requests that creates pull request #42."""
    adapter = MagicMock()
    adapter.owner = "knative"
    adapter.repo_name = "func"
    adapter.list_pull_requests_page = AsyncMock(return_value=[])
    adapter.create_pull_request = AsyncMock(return_value=make_pull_request("created", number=42))
    return adapter


@pytest.fixture
def tools() -> MagicMock:
    """A parent mock whose vcs and build_tool children record calls in one ordered list."""
    parent = MagicMock()
    parent.vcs = MagicMock(spec=VersionControlBase)
    parent.build_tool = MagicMock(spec=BuildToolBase)
    return parent
