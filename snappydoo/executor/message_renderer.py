"""Message renderer — drives the preview page and captures the message element."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

from playwright.async_api import Page

from snappydoo.models.config import RenderServiceConfig

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


def serialize_message(message: dict[str, Any]) -> str:
    return json.dumps(message, separators=(",", ":"), ensure_ascii=False)


def build_preview_url(config: RenderServiceConfig, message: dict[str, Any]) -> str:
    """Return the preview endpoint URL carrying the encoded message."""
    encoded = quote(serialize_message(message), safe=_URI_COMPONENT_SAFE)
    separator = "&" if "?" in config.preview_url else "?"
    return f"{config.preview_url}{separator}{config.message_param}={encoded}"


async def screenshot_element(page: Page, selector: str, padding: int = 0) -> bytes:
    """Screenshot the page clipped to an element's bounding box."""
    rect = await page.evaluate("""(selector) => {
        const element = document.querySelector(selector);
        if (!element) return null;
        const { x, y, width, height } = element.getBoundingClientRect();
        return { left: x, top: y, width, height };
    }""", selector)
    if not rect:
        raise RuntimeError(f"Message container {selector} not found on page")

    return await page.screenshot(clip={
        "x": rect["left"] - padding,
        "y": rect["top"] - padding,
        "width": rect["width"] + padding * 2,
        "height": rect["height"] + padding * 2,
    })


async def render_message(page: Page, message: dict[str, Any], config: RenderServiceConfig) -> bytes:
    """Render one message group and return the PNG bytes.

    Completion is signalled by the loading indicator becoming hidden.
    Raises playwright's TimeoutError when that takes longer than the
    configured timeout.
    """
    timeout_ms = config.render_timeout_seconds * 1000
    url = build_preview_url(config, message)
    logger.debug("Navigating to preview (%d chars)", len(url))
    await page.goto(url, timeout=timeout_ms)
    await page.wait_for_selector(
        config.loading_indicator_selector, state="hidden", timeout=timeout_ms,
    )
    return await screenshot_element(page, config.container_selector, config.padding)
