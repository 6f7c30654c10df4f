"""Output writer — persists rendered images."""

from __future__ import annotations

from pathlib import Path

from snappydoo.errors import WriteError


def write_image(output_path: str | Path, image: bytes) -> Path:
    """Write image bytes, creating parent folders and overwriting any existing file."""
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(image)
    except OSError as e:
        raise WriteError(str(output_path), e) from e
    return path
