"""
Job runner.

Backend-side execution of a single job run: pick one character and one
prompt, generate the message, and optionally append it to the character's
chat archive.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Optional

from storytime.core.exceptions import ValidationError
from storytime.core.logger import setup_logger
from storytime.interfaces.character_repository import ICharacterRepository
from storytime.interfaces.chat_repository import IChatRepository
from storytime.interfaces.message_generator import IMessageGenerator
from storytime.interfaces.prompt_repository import IPromptRepository
from storytime.models.character import Character
from storytime.models.chat import AddMessageRequest, Message
from storytime.models.job import Job
from storytime.models.prompt import Prompt

logger = setup_logger(__name__)


class JobRunner:
    """Executes jobs against the character, prompt and chat stores."""

    def __init__(
        self,
        character_repo: ICharacterRepository,
        prompt_repo: IPromptRepository,
        chat_repo: IChatRepository,
        generator: IMessageGenerator,
        rng: Optional[random.Random] = None,
    ):
        self.character_repo = character_repo
        self.prompt_repo = prompt_repo
        self.chat_repo = chat_repo
        self.generator = generator
        self.rng = rng or random.Random()

    async def run(self, job: Job, save_to_chat_history: bool = True) -> Message:
        """
        Run a job once.

        Raises:
            ValidationError: The job has no characters or no prompts
            NotFoundError: The chosen character or prompt does not exist
        """
        if not job.characters:
            raise ValidationError("Job has no characters")
        if not job.prompts:
            raise ValidationError("Job has no prompts")

        character = await self.character_repo.get(self.rng.choice(job.characters))
        prompt = await self.prompt_repo.get(self.rng.choice(job.prompts))
        return await self.execute(character, prompt, job.prompt_override, save_to_chat_history)

    async def trial_prompt(
        self, prompt: Prompt, character_name: str, save_to_chat_history: bool = False
    ) -> Message:
        """Run an unsaved prompt against a saved character."""
        character = await self.character_repo.get(character_name)
        return await self.execute(character, prompt, None, save_to_chat_history)

    async def trial_character(
        self, character: Character, prompt_name: str, save_to_chat_history: bool = False
    ) -> Message:
        """Run an unsaved character against a saved prompt."""
        prompt = await self.prompt_repo.get(prompt_name)
        return await self.execute(character, prompt, None, save_to_chat_history)

    async def execute(
        self,
        character: Character,
        prompt: Prompt,
        prompt_override: Optional[str],
        save_to_chat_history: bool,
    ) -> Message:
        logger.info(f"Generating message for {character.name} with prompt {prompt.title}")
        lines = await self.generator.generate(character, prompt, prompt_override)
        message = Message(
            text=lines,
            audio=[],
            images=[],
            read=False,
            timestamp=datetime.now(timezone.utc),
        )

        if save_to_chat_history:
            await self._save(character.name, message)
        return message

    async def _save(self, character: str, message: Message) -> None:
        try:
            await self.chat_repo.add_message(
                character, AddMessageRequest.model_validate(message.model_dump())
            )
        except Exception as e:
            # The generated message is still returned to the caller.
            logger.warning(f"Failed to save message to chat history for {character}: {e}")
