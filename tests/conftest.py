"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from playwright.async_api import Browser, BrowserContext, Page

from snappydoo.models.config import RenderServiceConfig, SnappydooConfig, ViewportConfig
from snappydoo.models.snapshot import RenderJob
from tests.helpers import PNG_BYTES, make_snap_file


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def render_config() -> RenderServiceConfig:
    """Create a render service configuration with a short timeout."""
    return RenderServiceConfig(
        preview_url="https://renderer.example.com/preview",
        render_timeout_seconds=5,
        viewport=ViewportConfig(width=1000, height=600, device_scale_factor=2),
    )


@pytest.fixture
def snappydoo_config(tmp_path: Path, render_config: RenderServiceConfig) -> SnappydooConfig:
    """Create a config pointing at temporary input and output folders."""
    return SnappydooConfig(
        input_path=str(tmp_path / "snapshots"),
        output_path=str(tmp_path / "images"),
        exclude=[],
        render=render_config,
    )


# ============================================================================
# Snapshot Fixtures
# ============================================================================


@pytest.fixture
def snapshot_dir(tmp_path: Path) -> Path:
    """Create an empty input folder."""
    path = tmp_path / "snapshots"
    path.mkdir()
    return path


@pytest.fixture
def write_snap(snapshot_dir: Path):
    """Fixture that writes a snapshot file below the input folder."""

    def _write(relative_path: str, entries: dict[str, str]) -> Path:
        path = snapshot_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(make_snap_file(entries), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def render_job(tmp_path: Path) -> RenderJob:
    """Create a render job for a simple message."""
    return RenderJob(
        output_path=(tmp_path / "images" / "Button" / "renders correctly.png").as_posix(),
        message={"attachments": [{"text": "hi"}]},
        source="Button/snap.test.js.snap [renders correctly]",
    )


# ============================================================================
# Playwright Fixtures
# ============================================================================


@pytest.fixture
def png_bytes() -> bytes:
    """A 1x1 pixel PNG."""
    return PNG_BYTES


@pytest.fixture
def mock_page() -> AsyncMock:
    """Create a mock Playwright page showing a rendered message."""
    page = AsyncMock(spec=Page)
    page.goto = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.evaluate = AsyncMock(return_value={"left": 10, "top": 20, "width": 300, "height": 80})
    page.screenshot = AsyncMock(return_value=PNG_BYTES)
    return page


@pytest.fixture
def mock_context(mock_page: AsyncMock) -> AsyncMock:
    """Create a mock Playwright browser context."""
    context = AsyncMock(spec=BrowserContext)
    context.new_page = AsyncMock(return_value=mock_page)
    return context


@pytest.fixture
def mock_browser(mock_context: AsyncMock) -> AsyncMock:
    """Create a mock Playwright browser."""
    browser = AsyncMock(spec=Browser)
    browser.new_context = AsyncMock(return_value=mock_context)
    browser.close = AsyncMock()
    return browser
