"""Data structures flowing through the extraction and render stages."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class FixtureFile(BaseModel):
    """A discovered snapshot fixture, relative to the input root."""
    model_config = ConfigDict(frozen=True)

    relative_path: str  # posix separators
    category: str


class ExtractedSnapshot(BaseModel):
    """One parsed snapshot entry, already normalized to a message group."""
    fixture: FixtureFile
    name: str
    message: dict[str, Any]


class RenderJob(BaseModel):
    model_config = ConfigDict(frozen=True)

    output_path: str
    message: dict[str, Any]
    source: str = ""  # "<fixture path> [<entry name>]", for diagnostics


class JobState(str, Enum):
    PENDING = "pending"
    SUBMITTED = "submitted"
    RENDERED = "rendered"
    TIMED_OUT = "timed_out"
    FAILED = "failed"
    RETRYING = "retrying"
    FATAL_FAILED = "fatal_failed"


class RenderOutcome(BaseModel):
    """Terminal record of one job. Image bytes are never kept here."""
    output_path: str
    state: JobState
    attempts: int = 0
    error: Optional[str] = None
    transitions: list[JobState] = Field(default_factory=list)  # every state entered, in order


class RunSummary(BaseModel):
    jobs_total: int = 0
    files_created: int = 0
    outcomes: list[RenderOutcome] = Field(default_factory=list)
    extraction_errors: list[str] = Field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def render_failures(self) -> list[RenderOutcome]:
        return [o for o in self.outcomes if o.state == JobState.FATAL_FAILED]
