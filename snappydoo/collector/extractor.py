"""Payload extractor — turns fixture files into normalized snapshot payloads."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Iterable, Optional

import json5

from snappydoo.errors import ExtractionError
from snappydoo.models.snapshot import ExtractedSnapshot, FixtureFile

from .normalizer import normalize_message
from .snap_parser import parse_snapshot_file

logger = logging.getLogger(__name__)

FIXTURE_SUFFIX = ".test.js.snap"

# <category>/<name>.test.js.snap; a fixture at the root uses its name as category
_FIXTURE_RE = re.compile(
    r"^(?:(?P<category>.+)/)?(?P<name>[^/]+)" + re.escape(FIXTURE_SUFFIX) + r"$"
)

# Type names the snapshot serializer prints before objects and arrays
TYPE_PREFIXES = ("Object ", "Array ")


def match_fixture(relative_path: str) -> Optional[FixtureFile]:
    """Derive the fixture category, or None when the path is not a fixture.

    The category is the folder holding the fixture, so sibling files such
    as `sub/Button.test.js.snap` and `sub/Card.test.js.snap` share the
    category `sub` and collide on a repeated entry name.
    """
    match = _FIXTURE_RE.match(relative_path)
    if not match:
        return None
    category = match.group("category") or match.group("name")
    return FixtureFile(relative_path=relative_path, category=category)


def is_excluded(fixture: FixtureFile, exclude: Iterable[str]) -> bool:
    return fixture.category in set(exclude)


def clean_snapshot_text(raw: str) -> str:
    """Strip serializer type prefixes and collapse line breaks."""
    cleaned = raw
    for prefix in TYPE_PREFIXES:
        cleaned = cleaned.replace(prefix, "")
    return cleaned.replace("\r", "").replace("\n", "")


def parse_entry(fixture_path: str, name: str, raw: str) -> dict[str, Any]:
    """Leniently parse one raw snapshot value into a message object.

    Comments, trailing commas, single quotes and unquoted keys are
    accepted. Raises ExtractionError scoped to this entry when the text
    does not parse or the value is not an object.
    """
    cleaned = clean_snapshot_text(raw)
    try:
        payload = json5.loads(cleaned)
    except ValueError as e:
        raise ExtractionError(fixture_path, name, str(e)) from e
    if not isinstance(payload, dict):
        raise ExtractionError(fixture_path, name, f"not an object ({type(payload).__name__})")
    return payload


def extract_snapshots(
    fixture: FixtureFile, input_root: Path,
) -> tuple[list[ExtractedSnapshot], list[ExtractionError]]:
    """Extract every entry of one fixture file.

    A bad entry is reported in the error list and does not stop its
    siblings from being extracted.
    """
    path = Path(input_root) / fixture.relative_path
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        error = ExtractionError(fixture.relative_path, None, str(e))
        logger.warning("%s", error)
        return [], [error]

    extracted: list[ExtractedSnapshot] = []
    errors: list[ExtractionError] = []
    for name, raw in parse_snapshot_file(content).items():
        try:
            payload = parse_entry(fixture.relative_path, name, raw)
        except ExtractionError as e:
            logger.warning("%s", e)
            errors.append(e)
            continue
        extracted.append(ExtractedSnapshot(
            fixture=fixture, name=name, message=normalize_message(payload),
        ))

    logger.debug("Extracted %d snapshot(s) from %s", len(extracted), fixture.relative_path)
    return extracted, errors


def collect_snapshots(
    relative_paths: Iterable[str],
    input_root: Path,
    exclude: Iterable[str] = (),
) -> tuple[list[ExtractedSnapshot], list[ExtractionError]]:
    """Match, filter and extract a set of fixture paths.

    Paths are processed in sorted order so the result does not depend on
    directory traversal order. Non-matching paths are skipped silently.
    """
    excluded = set(exclude)
    snapshots: list[ExtractedSnapshot] = []
    errors: list[ExtractionError] = []

    for relative_path in sorted(relative_paths):
        fixture = match_fixture(relative_path)
        if fixture is None:
            logger.debug("Skipping %s: not a snapshot fixture", relative_path)
            continue
        if is_excluded(fixture, excluded):
            logger.debug("Skipping %s: category '%s' is excluded",
                         relative_path, fixture.category)
            continue
        file_snapshots, file_errors = extract_snapshots(fixture, input_root)
        snapshots.extend(file_snapshots)
        errors.extend(file_errors)

    return snapshots, errors
