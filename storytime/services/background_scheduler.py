"""
Background scheduler for recurring jobs.

Runs every stored job on its cron cadence inside the local backend process.
Uses APScheduler for in-process scheduling without external dependencies.
"""

from __future__ import annotations

from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from storytime.core.config import get_settings
from storytime.core.logger import setup_logger
from storytime.infrastructure.local.job_repository import InMemoryJobRepository, storage_key
from storytime.models.job import Job
from storytime.utils.cron_utils import build_trigger

logger = setup_logger(__name__)


def schedule_id(job: Job) -> str:
    return storage_key(job)


class BackgroundScheduler:
    """
    Background scheduler for stored jobs.

    Each job gets one APScheduler entry keyed by its ID (or composite slug for
    legacy jobs). Call ``sync`` after any job is created, replaced or deleted.
    """

    def __init__(self, job_repo: InMemoryJobRepository):
        self._job_repo = job_repo
        self._scheduler: Optional[AsyncIOScheduler] = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None

    async def start(self):
        """Start the scheduler and register every stored job."""
        settings = get_settings()

        # Only run scheduler in non-test environments
        if settings.ENVIRONMENT == "test" or not settings.SCHEDULER_ENABLED:
            logger.info("Background scheduler disabled")
            return

        self._scheduler = AsyncIOScheduler()
        self._scheduler.start()
        await self.sync()
        logger.info("Background scheduler started")

    async def stop(self):
        """Stop the scheduler."""
        if self._scheduler:
            self._scheduler.shutdown(wait=False)
            self._scheduler = None
            logger.info("Background scheduler stopped")

    async def sync(self):
        """Make the scheduled entries match the stored jobs."""
        if self._scheduler is None:
            return

        jobs = await self._job_repo.list()
        wanted = {schedule_id(job): job for job in jobs}

        for scheduled in self._scheduler.get_jobs():
            if scheduled.id not in wanted:
                scheduled.remove()

        for job_id, job in wanted.items():
            try:
                trigger = build_trigger(job.cadence)
            except ValueError as e:
                logger.error(f"Skipping job {job_id} with invalid cadence '{job.cadence}': {e}")
                continue
            self._scheduler.add_job(
                self._run_job,
                trigger,
                args=[job_id],
                id=job_id,
                name=f"{job.character} / {job.prompt}",
                replace_existing=True,
            )

    async def _run_job(self, job_id: str):
        try:
            message = await self._job_repo.run_by_key(job_id)
            logger.info(f"Scheduled job {job_id} produced {len(message.text)} line(s)")
        except Exception as e:
            logger.error(f"Scheduled job {job_id} failed: {e}")


async def start_background_scheduler():
    """Start the shared background scheduler."""
    from storytime.api.deps import get_background_scheduler

    await get_background_scheduler().start()


async def stop_background_scheduler():
    """Stop the shared background scheduler."""
    from storytime.api.deps import get_background_scheduler

    await get_background_scheduler().stop()
