"""
Unit tests for JobRunner and the template generator.
"""

import random
from unittest.mock import AsyncMock

import pytest

from storytime.core.exceptions import NotFoundError, ValidationError
from storytime.infrastructure.local import TemplateMessageGenerator
from storytime.models.character import Character, CharacterCreate
from storytime.models.job import Job
from storytime.models.prompt import Prompt, PromptCreate
from storytime.services.job_runner import JobRunner


@pytest.fixture
async def seeded(character_repo, prompt_repo):
    await character_repo.create(CharacterCreate(name="Jane Doe"))
    await prompt_repo.create(
        PromptCreate(title="Morning Greeting", setup=["Good morning from {{char}}", "Coffee?"])
    )


class TestTemplateMessageGenerator:
    @pytest.mark.asyncio
    async def test_one_line_per_setup_step(self):
        lines = await TemplateMessageGenerator().generate(
            Character(name="Jane"), Prompt(title="P", setup=["Hi {{char}}", "  ", "Bye\nnow"])
        )
        assert lines == ["Hi Jane", "Bye", "now"]

    @pytest.mark.asyncio
    async def test_override_replaces_setup(self):
        lines = await TemplateMessageGenerator().generate(
            Character(name="Jane"), Prompt(title="P", setup=["ignored"]), "Only this"
        )
        assert lines == ["Only this"]

    @pytest.mark.asyncio
    async def test_empty_prompt_still_produces_a_line(self):
        lines = await TemplateMessageGenerator().generate(Character(name="Jane"), Prompt(title="P"))
        assert lines == ["Jane: P"]


class TestJobRunner:
    @pytest.mark.asyncio
    async def test_run_saves_to_chat(self, runner, chat_repo, seeded):
        job = Job(characters=["Jane Doe"], prompts=["Morning Greeting"], cadence="0 9 * * *")

        message = await runner.run(job)

        assert message.text == ["Good morning from Jane Doe", "Coffee?"]
        assert message.read is False
        assert message.timestamp is not None
        chat = await chat_repo.get("Jane Doe")
        assert chat.character == "Jane Doe"
        assert [m.text for m in chat.messages] == [message.text]

    @pytest.mark.asyncio
    async def test_run_without_saving_leaves_archive_alone(self, runner, chat_repo, seeded):
        job = Job(characters=["Jane Doe"], prompts=["Morning Greeting"], cadence="0 9 * * *")

        await runner.run(job, save_to_chat_history=False)

        assert await chat_repo.list_characters() == []

    @pytest.mark.asyncio
    async def test_run_requires_characters_and_prompts(self, runner):
        with pytest.raises(ValidationError):
            await runner.run(Job(characters=[], prompts=["P"], cadence="0 9 * * *"))
        with pytest.raises(ValidationError):
            await runner.run(Job(characters=["A"], prompts=[], cadence="0 9 * * *"))

    @pytest.mark.asyncio
    async def test_unknown_character_raises(self, runner, seeded):
        job = Job(characters=["Nobody"], prompts=["Morning Greeting"], cadence="0 9 * * *")
        with pytest.raises(NotFoundError):
            await runner.run(job)

    @pytest.mark.asyncio
    async def test_save_failure_still_returns_message(self, character_repo, prompt_repo, seeded):
        chat_repo = AsyncMock()
        chat_repo.add_message.side_effect = RuntimeError("disk full")
        runner = JobRunner(
            character_repo, prompt_repo, chat_repo, TemplateMessageGenerator(), random.Random(0)
        )
        job = Job(characters=["Jane Doe"], prompts=["Morning Greeting"], cadence="0 9 * * *")

        message = await runner.run(job)

        assert message.text
        chat_repo.add_message.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_trial_character_uses_unsaved_character(self, runner, chat_repo, seeded):
        message = await runner.trial_character(Character(name="Draft"), "Morning Greeting")

        assert message.text[0] == "Good morning from Draft"
        assert await chat_repo.list_characters() == []

    @pytest.mark.asyncio
    async def test_trial_prompt_can_save(self, runner, chat_repo, seeded):
        await runner.trial_prompt(Prompt(title="Draft", setup=["Hey"]), "Jane Doe", True)

        chat = await chat_repo.get("jane-doe")
        assert chat.messages[0].text == ["Hey"]
