"""
Unit tests for BackgroundScheduler.
"""

from uuid import UUID

import pytest

from storytime.core.config import Settings
from storytime.models.job import Job, JobById, JobCreate, JobUpdate
from storytime.services import background_scheduler
from storytime.services.background_scheduler import BackgroundScheduler, schedule_id


def test_schedule_id_prefers_job_id():
    job = Job(
        id=UUID("3f2b8c1e-0000-4000-8000-000000000001"),
        characters=["Jane"],
        prompts=["Greeting"],
        cadence="0 9 * * *",
    )
    assert schedule_id(job) == "3f2b8c1e-0000-4000-8000-000000000001"


def test_schedule_id_for_legacy_job():
    job = Job(characters=["Jane Doe"], prompts=["Morning Greeting"], cadence="0 9 * * *")
    assert schedule_id(job) == "jane-doe-morning-greeting"


@pytest.mark.asyncio
async def test_disabled_in_test_environment(job_repo):
    scheduler = BackgroundScheduler(job_repo)

    await scheduler.start()

    assert scheduler.running is False
    await scheduler.sync()
    await scheduler.stop()


@pytest.fixture
def enabled_settings(monkeypatch):
    settings = Settings(ENVIRONMENT="local", SCHEDULER_ENABLED=True)
    monkeypatch.setattr(background_scheduler, "get_settings", lambda: settings)
    return settings


@pytest.mark.asyncio
async def test_disabled_by_setting(job_repo, monkeypatch):
    settings = Settings(ENVIRONMENT="local", SCHEDULER_ENABLED=False)
    monkeypatch.setattr(background_scheduler, "get_settings", lambda: settings)
    scheduler = BackgroundScheduler(job_repo)

    await scheduler.start()

    assert scheduler.running is False


@pytest.mark.asyncio
async def test_start_registers_stored_jobs(job_repo, enabled_settings):
    weekday_job = await job_repo.create(
        JobCreate(characters=["Jane"], prompts=["Greeting"], cadence="0 9 * * 1-5")
    )
    weekend_job = job_repo.import_legacy(
        JobCreate.model_validate({"character": "Bob", "prompt": "Hi", "cadence": "0 9 * * 0,6"})
    )
    scheduler = BackgroundScheduler(job_repo)

    await scheduler.start()
    try:
        scheduled = {job.id: job for job in scheduler._scheduler.get_jobs()}

        assert set(scheduled) == {schedule_id(weekday_job), schedule_id(weekend_job)}
        assert scheduled[schedule_id(weekday_job)].next_run_time.weekday() in {0, 1, 2, 3, 4}
        assert scheduled[schedule_id(weekend_job)].next_run_time.weekday() in {5, 6}
        assert scheduled["bob-hi"].args == ("bob-hi",)
    finally:
        await scheduler.stop()

    assert scheduler.running is False


@pytest.mark.asyncio
async def test_sync_follows_repository_changes(job_repo, enabled_settings):
    kept = await job_repo.create(
        JobCreate(characters=["Jane"], prompts=["Greeting"], cadence="0 9 * * *")
    )
    dropped = await job_repo.create(
        JobCreate(characters=["Bob"], prompts=["Greeting"], cadence="0 9 * * *")
    )
    scheduler = BackgroundScheduler(job_repo)
    await scheduler.start()
    try:
        await job_repo.delete(JobById(str(dropped.id)))
        await job_repo.update(
            JobById(str(kept.id)),
            JobUpdate(characters=["Jane"], prompts=["Greeting"], cadence="30 7 * * 7"),
        )
        added = await job_repo.create(
            JobCreate(characters=["Ann"], prompts=["Greeting"], cadence="0 12 * * *")
        )

        await scheduler.sync()

        scheduled = {job.id: job for job in scheduler._scheduler.get_jobs()}
        assert set(scheduled) == {str(kept.id), str(added.id)}
        next_run = scheduled[str(kept.id)].next_run_time
        assert (next_run.weekday(), next_run.hour, next_run.minute) == (6, 7, 30)
    finally:
        await scheduler.stop()


@pytest.mark.asyncio
async def test_sync_skips_invalid_cadence(job_repo, enabled_settings):
    good = await job_repo.create(
        JobCreate(characters=["Jane"], prompts=["Greeting"], cadence="0 9 * * *")
    )
    # Bypasses route validation the way an imported record could.
    job_repo._jobs["broken"] = Job(characters=["Bob"], prompts=["Hi"], cadence="not a cron")
    scheduler = BackgroundScheduler(job_repo)

    await scheduler.start()
    try:
        assert [job.id for job in scheduler._scheduler.get_jobs()] == [str(good.id)]
    finally:
        await scheduler.stop()
