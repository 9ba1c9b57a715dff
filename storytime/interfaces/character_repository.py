"""
Character repository interface.

Characters are addressed by the slug of their name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storytime.models.character import Character, CharacterCreate, CharacterUpdate


class ICharacterRepository(ABC):
    """Abstract interface for character persistence."""

    @abstractmethod
    async def list(self) -> list[Character]:
        """List all characters."""
        pass

    @abstractmethod
    async def get(self, name: str) -> Character:
        """Get a character by name. Raises NotFoundError."""
        pass

    @abstractmethod
    async def create(self, data: CharacterCreate) -> Character:
        """Create a character. Raises ConflictError if the name is taken."""
        pass

    @abstractmethod
    async def update(self, name: str, update: CharacterUpdate) -> Character:
        """Update a character. Raises NotFoundError."""
        pass

    @abstractmethod
    async def delete(self, name: str) -> None:
        """Delete a character. Raises NotFoundError."""
        pass
