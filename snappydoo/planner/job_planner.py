"""Output path resolver — maps extracted snapshots to render jobs."""

from __future__ import annotations

import logging
from pathlib import Path

from snappydoo.errors import PathCollisionError
from snappydoo.models.snapshot import ExtractedSnapshot, RenderJob

logger = logging.getLogger(__name__)

IMAGE_EXTENSION = ".png"


def resolve_output_path(output_root: str | Path, category: str, snapshot_name: str) -> str:
    """Return ``{output_root}/{category}/{snapshot_name}.png``."""
    return (Path(output_root) / category / f"{snapshot_name}{IMAGE_EXTENSION}").as_posix()


def plan_render_jobs(
    snapshots: list[ExtractedSnapshot], output_root: str | Path,
) -> dict[str, RenderJob]:
    """Build the ordered {output path: job} map.

    Raises PathCollisionError when two snapshots resolve to the same path,
    before anything is rendered.
    """
    jobs: dict[str, RenderJob] = {}
    for snap in snapshots:
        output_path = resolve_output_path(output_root, snap.fixture.category, snap.name)
        source = f"{snap.fixture.relative_path} [{snap.name}]"
        if output_path in jobs:
            raise PathCollisionError(output_path, jobs[output_path].source, source)
        jobs[output_path] = RenderJob(
            output_path=output_path, message=snap.message, source=source,
        )
    logger.debug("Planned %d render job(s)", len(jobs))
    return jobs
