"""Render executor — renders planned jobs one at a time using Playwright."""

from __future__ import annotations

import logging
from typing import Optional

from playwright.async_api import Page, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from snappydoo.errors import RenderError
from snappydoo.models.config import RenderServiceConfig
from snappydoo.models.snapshot import JobState, RenderJob, RenderOutcome, RunSummary
from snappydoo.utils.browser import create_render_context, launch_browser

from .message_renderer import render_message
from .output_writer import write_image

logger = logging.getLogger(__name__)

# First attempt plus one retry
MAX_ATTEMPTS = 2


class Executor:
    """Renders a job map against a single shared browser page."""

    def __init__(self, config: RenderServiceConfig):
        self.config = config

    async def execute(self, jobs: dict[str, RenderJob]) -> RunSummary:
        """Render and write every job, strictly sequentially.

        The browser is launched once and closed once, however many jobs
        fail. A job that fails twice is recorded and skipped; a WriteError
        aborts the batch.
        """
        outcomes: list[RenderOutcome] = []
        files_created = 0
        total = len(jobs)

        async with async_playwright() as p:
            logger.debug("Launching Chromium (headless=%s)...", self.config.headless)
            browser = await launch_browser(p, headless=self.config.headless)
            try:
                context = await create_render_context(browser, self.config.viewport)
                page = await context.new_page()

                for index, job in enumerate(jobs.values()):
                    logger.debug("Rendering [%d/%d]: %s", index + 1, total, job.output_path)
                    outcome, image = await self.render_job(page, job)
                    outcomes.append(outcome)
                    if image is None:
                        continue
                    write_image(job.output_path, image)
                    files_created += 1
                    logger.info("Created %s", job.output_path)
            finally:
                await browser.close()

        return RunSummary(
            jobs_total=total,
            files_created=files_created,
            outcomes=outcomes,
        )

    async def render_job(self, page: Page, job: RenderJob) -> tuple[RenderOutcome, Optional[bytes]]:
        """Render one job, retrying the whole sequence once on any failure.

        Returns the terminal outcome and the image bytes (None when the job
        ended in FATAL_FAILED). The outcome lists every state the job went
        through, starting at PENDING.
        """
        transitions = [JobState.PENDING]
        cause: Optional[BaseException] = None

        for attempt in range(1, MAX_ATTEMPTS + 1):
            transitions.append(JobState.SUBMITTED)
            try:
                image = await render_message(page, job.message, self.config)
            except PlaywrightTimeoutError as e:
                transitions.append(JobState.TIMED_OUT)
                cause = e
            except Exception as e:
                transitions.append(JobState.FAILED)
                cause = e
            else:
                transitions.append(JobState.RENDERED)
                return RenderOutcome(
                    output_path=job.output_path,
                    state=JobState.RENDERED,
                    attempts=attempt,
                    transitions=transitions,
                ), image

            if attempt < MAX_ATTEMPTS:
                logger.warning("Render of %s %s: %s", job.output_path,
                               transitions[-1].value.replace("_", " "), cause)
                transitions.append(JobState.RETRYING)
                logger.info("Retrying %s", job.output_path)

        transitions.append(JobState.FATAL_FAILED)
        error = RenderError(job.output_path, cause)
        logger.error("%s (source: %s)", error, job.source or "unknown")
        return RenderOutcome(
            output_path=job.output_path,
            state=JobState.FATAL_FAILED,
            attempts=MAX_ATTEMPTS,
            error=str(error),
            transitions=transitions,
        ), None
