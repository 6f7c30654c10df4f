"""Message normalizer — canonicalizes payloads into the message-group shape."""

from __future__ import annotations

from typing import Any

ATTACHMENTS_KEY = "attachments"


def normalize_message(payload: dict[str, Any]) -> dict[str, Any]:
    """Wrap a single message as ``{"attachments": [payload]}``.

    Payloads that already carry an ``attachments`` key are returned
    unchanged, unknown fields included.
    """
    if ATTACHMENTS_KEY in payload:
        return payload
    return {ATTACHMENTS_KEY: [payload]}
