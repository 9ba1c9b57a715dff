"""
Unit tests for JobService.
"""

from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from storytime.models.chat import Message
from storytime.models.job import Job, JobById, JobByLegacyComposite, JobUpdate
from storytime.models.prompt import Prompt
from storytime.services.job_service import JobService, effective_instructions

JOB_ID = "3f2b8c1e-0000-4000-8000-000000000001"


@pytest.fixture
def mock_repo():
    return AsyncMock()


@pytest.fixture
def service(mock_repo):
    return JobService(mock_repo)


def test_effective_instructions_prefers_override():
    prompt = Prompt(title="Greeting", setup=["Say hello", "Ask a question"])
    assert effective_instructions(prompt, "Just wave") == ["Just wave"]
    assert effective_instructions(prompt, None) == ["Say hello", "Ask a question"]


def test_describe_cadence_uses_formatter(service):
    job = Job(characters=["A"], prompts=["P"], cadence="0 9 * * 1-5")
    assert service.describe_cadence(job) == "9:00 on Weekdays"


def test_describe_cadence_with_custom_formatter(mock_repo):
    service = JobService(mock_repo, formatter=str.upper)
    job = Job(characters=["A"], prompts=["P"], cadence="@daily")
    assert service.describe_cadence(job) == "@DAILY"


def test_ref_for_legacy_job(service):
    job = Job(characters=["Jane Doe"], prompts=["Morning Greeting"], cadence="0 9 * * *")
    assert service.ref_for(job) == JobByLegacyComposite("Jane Doe", "Morning Greeting")


@pytest.mark.asyncio
async def test_update_passes_reference_through(service, mock_repo):
    ref = JobById(JOB_ID)
    update = JobUpdate(id=UUID(JOB_ID), characters=["A"], prompts=["P"], cadence="0 9 * * *")

    await service.update(ref, update)

    mock_repo.update.assert_awaited_once_with(ref, update)


@pytest.mark.asyncio
async def test_run_unsaved_forwards_save_flag(service, mock_repo):
    mock_repo.run_unsaved.return_value = Message(text=["hi"])
    job = Job(characters=["A"], prompts=["P"], cadence="0 9 * * *")

    message = await service.run_unsaved(job, save_to_chat_history=False)

    assert message.text == ["hi"]
    mock_repo.run_unsaved.assert_awaited_once_with(job, save_to_chat_history=False)


@pytest.mark.asyncio
async def test_trials_default_to_not_saving(service, mock_repo):
    prompt = Prompt(title="Greeting")

    await service.trial_prompt(prompt, "Jane Doe")

    mock_repo.trial_prompt.assert_awaited_once_with(prompt, "Jane Doe", False)


def test_effective_prompt_text(service):
    prompt = Prompt(title="Greeting", setup=["Say hello", "Ask a question"])
    job = Job(characters=["A"], prompts=["Greeting"], cadence="0 9 * * *")

    assert service.effective_prompt_text(job, prompt) == "Say hello\nAsk a question"

    job.prompt_override = "Just wave"
    assert service.effective_prompt_text(job, prompt) == "Just wave"
