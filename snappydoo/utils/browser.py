"""Browser session helpers for the render service."""

from __future__ import annotations

from playwright.async_api import Browser, BrowserContext, Playwright

from snappydoo.models.config import ViewportConfig


async def launch_browser(playwright: Playwright, headless: bool = True) -> Browser:
    """Launch the Chromium instance that hosts the render session."""
    return await playwright.chromium.launch(headless=headless)


async def create_render_context(browser: Browser, viewport: ViewportConfig) -> BrowserContext:
    """Create a browser context sized for message previews.

    Args:
        viewport: Page size in CSS pixels plus the device scale factor; a
            factor of 2 gives retina-resolution screenshots.
    """
    return await browser.new_context(
        viewport={"width": viewport.width, "height": viewport.height},
        device_scale_factor=viewport.device_scale_factor,
    )
