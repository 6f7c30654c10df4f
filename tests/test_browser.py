"""Tests for browser session helpers."""

from unittest.mock import AsyncMock

import pytest

from snappydoo.models.config import ViewportConfig
from snappydoo.utils.browser import create_render_context, launch_browser


class TestLaunchBrowser:
    """Tests for launching Chromium."""

    @pytest.mark.asyncio
    async def test_headless_by_default(self):
        mock_playwright = AsyncMock()

        await launch_browser(mock_playwright)

        mock_playwright.chromium.launch.assert_called_once_with(headless=True)

    @pytest.mark.asyncio
    async def test_headed(self):
        mock_playwright = AsyncMock()

        await launch_browser(mock_playwright, headless=False)

        mock_playwright.chromium.launch.assert_called_once_with(headless=False)


class TestCreateRenderContext:
    """Tests for create_render_context."""

    @pytest.mark.asyncio
    async def test_viewport_and_scale_passed(self):
        mock_browser = AsyncMock()

        await create_render_context(
            mock_browser, ViewportConfig(width=1000, height=600, device_scale_factor=2),
        )

        call_kwargs = mock_browser.new_context.call_args.kwargs
        assert call_kwargs["viewport"] == {"width": 1000, "height": 600}
        assert call_kwargs["device_scale_factor"] == 2

    @pytest.mark.asyncio
    async def test_browser_identity_left_to_playwright(self):
        mock_browser = AsyncMock()

        await create_render_context(mock_browser, ViewportConfig())

        call_kwargs = mock_browser.new_context.call_args.kwargs
        assert "user_agent" not in call_kwargs
        assert "locale" not in call_kwargs

    @pytest.mark.asyncio
    async def test_returns_new_context(self):
        mock_browser = AsyncMock()
        mock_context = AsyncMock()
        mock_browser.new_context = AsyncMock(return_value=mock_context)

        context = await create_render_context(mock_browser, ViewportConfig())

        assert context is mock_context
