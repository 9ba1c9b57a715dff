"""
HTTP implementation of the job repository.

Single-job operations take a JobRef; the addressing module turns it into
either ``/api/jobs/{id}`` or the legacy ``/api/jobs/{character}-{prompt}``.
"""

from __future__ import annotations

from storytime.infrastructure.remote.api_client import ApiClient
from storytime.interfaces.job_repository import IJobRepository
from storytime.models.character import Character
from storytime.models.chat import Message
from storytime.models.job import (
    Job,
    JobById,
    JobCreate,
    JobRef,
    JobUpdate,
    RunJobRequest,
)
from storytime.models.prompt import Prompt
from storytime.models.test_run import TestCharacterRequest, TestPromptRequest
from storytime.services import addressing


def _describe(ref: JobRef) -> str:
    if isinstance(ref, JobById):
        return f"Job with ID '{ref.id}'"
    return f"Job for '{ref.character}' and '{ref.prompt}'"


class HttpJobRepository(IJobRepository):
    """Jobs served by ``/api/jobs``."""

    def __init__(self, client: ApiClient):
        self._client = client

    async def list(self) -> list[Job]:
        data = await self._client.request(
            "GET", addressing.jobs_path(), action="fetch jobs", require_data=False
        )
        return [Job.model_validate(item) for item in data or []]

    async def get(self, ref: JobRef) -> Job:
        data = await self._client.request(
            "GET",
            addressing.job_path(ref),
            action="fetch job",
            not_found=f"{_describe(ref)} not found",
        )
        return Job.model_validate(data)

    async def create(self, data: JobCreate) -> Job:
        created = await self._client.request(
            "POST",
            addressing.jobs_path(),
            action="create job",
            json=data.model_dump(mode="json", by_alias=True),
        )
        return Job.model_validate(created)

    async def update(self, ref: JobRef, update: JobUpdate) -> Job:
        updated = await self._client.request(
            "PUT",
            addressing.job_path(ref),
            action="update job",
            json=update.model_dump(mode="json", by_alias=True),
            not_found=f"{_describe(ref)} not found",
        )
        return Job.model_validate(updated)

    async def delete(self, ref: JobRef) -> None:
        await self._client.request(
            "DELETE",
            addressing.job_path(ref),
            action="delete job",
            require_data=False,
            not_found=f"{_describe(ref)} not found",
        )

    async def run(self, ref: JobRef) -> Message:
        data = await self._client.request(
            "POST",
            addressing.job_run_path(ref),
            action="execute job",
            not_found=f"{_describe(ref)} not found",
        )
        return Message.model_validate(data)

    async def run_unsaved(self, job: Job, save_to_chat_history: bool = True) -> Message:
        body = RunJobRequest(job=job, save_to_chat_history=save_to_chat_history)
        data = await self._client.request(
            "POST",
            addressing.job_run_unsaved_path(),
            action="execute job",
            json=body.model_dump(mode="json", by_alias=True),
        )
        return Message.model_validate(data)

    async def trial_prompt(
        self, prompt: Prompt, character_name: str, save_to_chat_history: bool = False
    ) -> Message:
        body = TestPromptRequest(
            prompt=prompt,
            character_name=character_name,
            save_to_chat_history=save_to_chat_history,
        )
        data = await self._client.request(
            "POST",
            addressing.prompt_test_run_path(),
            action="test prompt",
            json=body.model_dump(mode="json", by_alias=True),
        )
        return Message.model_validate(data)

    async def trial_character(
        self, character: Character, prompt_name: str, save_to_chat_history: bool = False
    ) -> Message:
        body = TestCharacterRequest(
            character=character,
            prompt_name=prompt_name,
            save_to_chat_history=save_to_chat_history,
        )
        data = await self._client.request(
            "POST",
            addressing.character_test_run_path(),
            action="test character",
            json=body.model_dump(mode="json", by_alias=True),
        )
        return Message.model_validate(data)
