"""
Job service.

Models recurring generation jobs on the client. The cadence is kept as an
opaque cron string and only formatted for display; the backend owns all
recurring execution. Runs happen only when a caller asks for one.
"""

from __future__ import annotations

from typing import Optional

from storytime.core.logger import setup_logger
from storytime.interfaces.job_repository import IJobRepository
from storytime.models.character import Character
from storytime.models.chat import Message
from storytime.models.job import Job, JobCreate, JobRef, JobUpdate, job_ref_for
from storytime.models.prompt import Prompt
from storytime.utils.cron_utils import CadenceFormatter, format_cadence

logger = setup_logger(__name__)


def effective_instructions(prompt: Prompt, prompt_override: Optional[str]) -> list[str]:
    """Instructions a run will use: the override if set, else the prompt's setup steps."""
    if prompt_override is not None:
        return [prompt_override]
    return list(prompt.setup)


class JobService:
    """Client-side operations on jobs."""

    def __init__(
        self,
        job_repo: IJobRepository,
        formatter: CadenceFormatter = format_cadence,
    ):
        self.job_repo = job_repo
        self.formatter = formatter

    async def list_jobs(self) -> list[Job]:
        return await self.job_repo.list()

    async def get(self, ref: JobRef) -> Job:
        return await self.job_repo.get(ref)

    async def create(self, data: JobCreate) -> Job:
        return await self.job_repo.create(data)

    async def update(self, ref: JobRef, data: JobUpdate) -> Job:
        """Replace the job at ``ref``. The reference is used as given."""
        return await self.job_repo.update(ref, data)

    async def delete(self, ref: JobRef) -> None:
        await self.job_repo.delete(ref)

    async def run(self, ref: JobRef) -> Message:
        """Execute a persisted job now. The backend appends the result to the chat."""
        logger.info(f"Running job {ref}")
        return await self.job_repo.run(ref)

    async def run_unsaved(self, job: Job, save_to_chat_history: bool = True) -> Message:
        """Execute a job passed in full.

        With ``save_to_chat_history`` false the result is returned to the
        caller only and the archive is left untouched.
        """
        return await self.job_repo.run_unsaved(job, save_to_chat_history=save_to_chat_history)

    async def trial_prompt(
        self, prompt: Prompt, character_name: str, save_to_chat_history: bool = False
    ) -> Message:
        return await self.job_repo.trial_prompt(prompt, character_name, save_to_chat_history)

    async def trial_character(
        self, character: Character, prompt_name: str, save_to_chat_history: bool = False
    ) -> Message:
        return await self.job_repo.trial_character(character, prompt_name, save_to_chat_history)

    def describe_cadence(self, job: Job) -> str:
        return self.formatter(job.cadence)

    def effective_prompt_text(self, job: Job, prompt: Prompt) -> str:
        """Text a run of ``job`` would send for ``prompt``, one instruction per line."""
        return "\n".join(effective_instructions(prompt, job.prompt_override))

    @staticmethod
    def ref_for(job: Job) -> JobRef:
        return job_ref_for(job)
