"""
Job API endpoints.

A job path key is either the job's ID or, for legacy jobs, the composite
``{character}-{prompt}`` slug.
"""

from fastapi import APIRouter, HTTPException, status

from storytime.api.deps import JobRepo, Runner, Scheduler
from storytime.api.responses import ok
from storytime.core.logger import setup_logger
from storytime.models.chat import Message
from storytime.models.envelope import ApiResponse
from storytime.models.job import Job, JobBase, JobCreate, JobUpdate, RunJobRequest
from storytime.utils.cron_utils import is_valid_cadence

logger = setup_logger(__name__)

router = APIRouter()


def _check_cadence(job: JobBase) -> None:
    if not is_valid_cadence(job.cadence):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid cadence '{job.cadence}'",
        )


@router.get("", response_model=ApiResponse[list[Job]])
async def list_jobs(repo: JobRepo):
    """List all jobs, legacy ones included."""
    return ok(await repo.list())


@router.post("", response_model=ApiResponse[Job], status_code=status.HTTP_201_CREATED)
async def create_job(payload: JobCreate, repo: JobRepo, scheduler: Scheduler):
    """Create a job. The returned job carries its new ID."""
    _check_cadence(payload)
    job = await repo.create(payload)
    await scheduler.sync()
    return ok(job, "Job created")


@router.post("/run", response_model=ApiResponse[Message])
async def run_unsaved_job(payload: RunJobRequest, runner: Runner):
    """Run a job passed in the body; it need not be persisted."""
    message = await runner.run(payload.job, save_to_chat_history=payload.save_to_chat_history)
    return ok(message, "Job executed")


@router.get("/{key}", response_model=ApiResponse[Job])
async def get_job(key: str, repo: JobRepo):
    return ok(await repo.get_by_key(key))


@router.put("/{key}", response_model=ApiResponse[Job])
async def update_job(key: str, payload: JobUpdate, repo: JobRepo, scheduler: Scheduler):
    """Replace a job in full."""
    _check_cadence(payload)
    job = await repo.update_by_key(key, payload)
    await scheduler.sync()
    return ok(job, "Job updated")


@router.delete("/{key}", response_model=ApiResponse[None])
async def delete_job(key: str, repo: JobRepo, scheduler: Scheduler):
    await repo.delete_by_key(key)
    await scheduler.sync()
    return ok(message="Job deleted")


@router.post("/{key}/run", response_model=ApiResponse[Message])
async def run_job(key: str, repo: JobRepo):
    """Run a stored job now and save the result to its character's chat."""
    logger.info(f"Manual run of job {key}")
    return ok(await repo.run_by_key(key), "Job executed")
