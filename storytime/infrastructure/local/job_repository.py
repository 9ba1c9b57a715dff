"""In-memory job repository implementation."""

from __future__ import annotations

from uuid import uuid4

from storytime.core.exceptions import ConflictError, NotFoundError, ValidationError
from storytime.interfaces.job_repository import IJobRepository
from storytime.models.character import Character
from storytime.models.chat import Message
from storytime.models.job import Job, JobCreate, JobRef, JobUpdate
from storytime.models.prompt import Prompt
from storytime.services.addressing import job_segment
from storytime.services.job_runner import JobRunner
from storytime.utils.slug import job_slug


def legacy_key(job: Job) -> str:
    return job_slug(job.character or "", job.prompt or "")


def storage_key(job: Job) -> str:
    """Key a job is stored under: its ID, or the composite slug for legacy jobs."""
    return str(job.id) if job.id is not None else legacy_key(job)


class InMemoryJobRepository(IJobRepository):
    """In-memory implementation of job repository.

    Jobs with an ID are stored under it. Legacy jobs have none and are stored
    under their composite slug. A path key is matched against stored keys
    first, then against the composite slug of every job, first match wins.
    """

    def __init__(self, runner: JobRunner):
        self.runner = runner
        self._jobs: dict[str, Job] = {}

    def _find(self, key: str) -> tuple[str, Job]:
        job = self._jobs.get(key)
        if job is not None:
            return key, job
        for stored_key, candidate in self._jobs.items():
            if legacy_key(candidate) == key:
                return stored_key, candidate
        raise NotFoundError(f"Job '{key}' not found")

    async def list(self) -> list[Job]:
        return list(self._jobs.values())

    async def create(self, data: JobCreate) -> Job:
        job = Job(id=uuid4(), **data.model_dump())
        self._jobs[storage_key(job)] = job
        return job

    def import_legacy(self, data: JobCreate) -> Job:
        """Store a job without an ID, addressable only by its composite slug."""
        job = Job(**data.model_dump())
        if not job.character or not job.prompt:
            raise ValidationError("Legacy jobs need a character and a prompt")
        self._jobs[storage_key(job)] = job
        return job

    # Path-key operations, used by the HTTP routes.

    async def get_by_key(self, key: str) -> Job:
        return self._find(key)[1]

    async def update_by_key(self, key: str, update: JobUpdate) -> Job:
        stored_key, existing = self._find(key)
        job = Job(
            id=existing.id or update.id,
            **update.model_dump(exclude={"id"}),
        )
        new_key = storage_key(job)
        if new_key != stored_key and new_key in self._jobs:
            raise ConflictError(f"Job '{new_key}' already exists")
        del self._jobs[stored_key]
        self._jobs[new_key] = job
        return job

    async def delete_by_key(self, key: str) -> None:
        stored_key, _ = self._find(key)
        del self._jobs[stored_key]

    async def run_by_key(self, key: str) -> Message:
        return await self.runner.run(self._find(key)[1], save_to_chat_history=True)

    # JobRef operations.

    async def get(self, ref: JobRef) -> Job:
        return await self.get_by_key(job_segment(ref))

    async def update(self, ref: JobRef, update: JobUpdate) -> Job:
        return await self.update_by_key(job_segment(ref), update)

    async def delete(self, ref: JobRef) -> None:
        await self.delete_by_key(job_segment(ref))

    async def run(self, ref: JobRef) -> Message:
        return await self.run_by_key(job_segment(ref))

    async def run_unsaved(self, job: Job, save_to_chat_history: bool = True) -> Message:
        return await self.runner.run(job, save_to_chat_history=save_to_chat_history)

    async def trial_prompt(
        self, prompt: Prompt, character_name: str, save_to_chat_history: bool = False
    ) -> Message:
        return await self.runner.trial_prompt(prompt, character_name, save_to_chat_history)

    async def trial_character(
        self, character: Character, prompt_name: str, save_to_chat_history: bool = False
    ) -> Message:
        return await self.runner.trial_character(character, prompt_name, save_to_chat_history)

