"""
Job repository interface.

Every operation that addresses a single job accepts a JobRef, so callers
holding either an ID or a legacy (character, prompt) pair use the same
methods.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storytime.models.character import Character
from storytime.models.chat import Message
from storytime.models.job import Job, JobCreate, JobRef, JobUpdate
from storytime.models.prompt import Prompt


class IJobRepository(ABC):
    """Abstract interface for job persistence and execution."""

    @abstractmethod
    async def list(self) -> list[Job]:
        """List all jobs."""
        pass

    @abstractmethod
    async def get(self, ref: JobRef) -> Job:
        """Get a job. Raises NotFoundError."""
        pass

    @abstractmethod
    async def create(self, data: JobCreate) -> Job:
        """Create a job; the returned job carries its new ID."""
        pass

    @abstractmethod
    async def update(self, ref: JobRef, update: JobUpdate) -> Job:
        """Replace a job. Raises NotFoundError."""
        pass

    @abstractmethod
    async def delete(self, ref: JobRef) -> None:
        """Delete a job. Raises NotFoundError."""
        pass

    @abstractmethod
    async def run(self, ref: JobRef) -> Message:
        """Execute a persisted job now; the result is saved to chat history."""
        pass

    @abstractmethod
    async def run_unsaved(self, job: Job, save_to_chat_history: bool = True) -> Message:
        """Execute a job passed in full, persisted or not."""
        pass

    @abstractmethod
    async def trial_prompt(
        self, prompt: Prompt, character_name: str, save_to_chat_history: bool = False
    ) -> Message:
        """Run an unsaved prompt against a saved character."""
        pass

    @abstractmethod
    async def trial_character(
        self, character: Character, prompt_name: str, save_to_chat_history: bool = False
    ) -> Message:
        """Run an unsaved character against a saved prompt."""
        pass
