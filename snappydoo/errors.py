"""Error taxonomy for the snapshot render pipeline."""

from __future__ import annotations

from typing import Optional


class SnappydooError(Exception):
    """Base class for every error raised by snappydoo."""


class ConfigError(SnappydooError):
    """Configuration could not be read, or required paths are missing."""


class DiscoveryError(SnappydooError):
    """The input root does not exist or cannot be read. Fatal."""


class ExtractionError(SnappydooError):
    """One snapshot entry (or one unreadable fixture file) could not be parsed.

    Scoped to a single entry: siblings in the same file are still extracted.
    """

    def __init__(self, fixture_path: str, entry_name: Optional[str], cause: str):
        self.fixture_path = fixture_path
        self.entry_name = entry_name
        self.cause = cause
        where = f"{fixture_path} [{entry_name}]" if entry_name else fixture_path
        super().__init__(f"Failed to extract {where}: {cause}")


class PathCollisionError(SnappydooError):
    """Two render jobs resolved to the same output path. Fatal."""

    def __init__(self, output_path: str, first_source: str, second_source: str):
        self.output_path = output_path
        self.first_source = first_source
        self.second_source = second_source
        super().__init__(
            f"Output path {output_path} produced by both "
            f"{first_source} and {second_source}"
        )


class RenderError(SnappydooError):
    """A render job failed on its first attempt and on its retry."""

    def __init__(self, output_path: str, cause: BaseException):
        self.output_path = output_path
        self.cause = cause
        super().__init__(f"Failed to render {output_path}: {cause}")


class WriteError(SnappydooError):
    """An image could not be written to disk. Fatal."""

    def __init__(self, output_path: str, cause: BaseException):
        self.output_path = output_path
        self.cause = cause
        super().__init__(f"Failed to create file {output_path}: {cause}")
