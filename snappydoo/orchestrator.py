"""Pipeline orchestrator — coordinates collect, plan and render stages."""

from __future__ import annotations

import asyncio
import logging
import time

from snappydoo.collector.extractor import collect_snapshots
from snappydoo.collector.locator import locate_fixtures
from snappydoo.errors import ExtractionError
from snappydoo.executor.executor import Executor
from snappydoo.models.config import SnappydooConfig
from snappydoo.models.snapshot import RenderJob, RunSummary
from snappydoo.planner.job_planner import plan_render_jobs

logger = logging.getLogger(__name__)


def pluralize(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


class Orchestrator:
    """Coordinates the snapshot render pipeline."""

    def __init__(self, config: SnappydooConfig):
        self.config = config
        self.input_root, self.output_root = config.require_paths()
        self.extraction_errors: list[ExtractionError] = []

    def plan(self) -> dict[str, RenderJob]:
        """Discover, extract, filter and resolve; nothing is rendered.

        The returned map is complete before any render begins.
        """
        logger.debug("Scanning %s for snapshot fixtures...", self.input_root)
        fixture_paths = list(locate_fixtures(self.input_root))
        logger.debug("Found %d .snap file(s)", len(fixture_paths))

        snapshots, errors = collect_snapshots(
            fixture_paths, self.input_root, exclude=self.config.exclude,
        )
        self.extraction_errors = errors
        if errors:
            logger.warning("Skipped %d snapshot(s) that could not be parsed", len(errors))

        return plan_render_jobs(snapshots, self.output_root)

    def run(self) -> RunSummary:
        """Execute the complete pipeline."""
        return asyncio.run(self._run_pipeline())

    async def _run_pipeline(self) -> RunSummary:
        start = time.time()
        jobs = self.plan()

        logger.info("Fetching %s from message builder", pluralize(len(jobs), "screenshot"))
        if jobs:
            executor = Executor(self.config.render)
            summary = await executor.execute(jobs)
        else:
            summary = RunSummary()

        summary.extraction_errors = [str(e) for e in self.extraction_errors]
        summary.duration_seconds = round(time.time() - start, 2)
        logger.info("Message builder fetching complete. Created %s",
                    pluralize(summary.files_created, "file"))
        return summary
