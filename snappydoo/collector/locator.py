"""Fixture locator — finds snapshot files under the input root."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from snappydoo.errors import DiscoveryError

logger = logging.getLogger(__name__)

FIXTURE_EXTENSION = ".snap"


def locate_fixtures(input_root: str | Path) -> Iterator[str]:
    """Lazily yield fixture paths under ``input_root``, relative to it.

    The root is checked eagerly so a bad input path fails before any
    iteration starts. Paths use posix separators.
    """
    root = Path(input_root)
    if not root.exists():
        raise DiscoveryError(f"Input folder does not exist: {root}")
    if not root.is_dir():
        raise DiscoveryError(f"Input path is not a folder: {root}")
    if not os.access(root, os.R_OK | os.X_OK):
        raise DiscoveryError(f"Input folder is not readable: {root}")
    return _walk(root)


def _walk(root: Path) -> Iterator[str]:
    for path in root.rglob(f"*{FIXTURE_EXTENSION}"):
        if not path.is_file():
            continue
        relative = path.relative_to(root).as_posix()
        logger.debug("Found fixture %s", relative)
        yield relative
