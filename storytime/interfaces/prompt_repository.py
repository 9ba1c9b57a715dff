"""
Prompt repository interface.

Prompts are addressed by the slug of their title.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storytime.models.prompt import Prompt, PromptCreate, PromptUpdate


class IPromptRepository(ABC):
    """Abstract interface for prompt persistence."""

    @abstractmethod
    async def list(self) -> list[Prompt]:
        """List all prompts."""
        pass

    @abstractmethod
    async def get(self, title: str) -> Prompt:
        """Get a prompt by title. Raises NotFoundError."""
        pass

    @abstractmethod
    async def create(self, data: PromptCreate) -> Prompt:
        """Create a prompt. Raises ConflictError if the title is taken."""
        pass

    @abstractmethod
    async def update(self, title: str, update: PromptUpdate) -> Prompt:
        """Update a prompt. Raises NotFoundError."""
        pass

    @abstractmethod
    async def delete(self, title: str) -> None:
        """Delete a prompt. Raises NotFoundError."""
        pass
