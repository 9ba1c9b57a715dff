"""
Chat archive repository interface.

Archives are keyed by character name. Messages are addressed by index only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storytime.models.chat import (
    AddMessageRequest,
    Chat,
    UpdateChatRequest,
    UpdateMessageRequest,
)


class IChatRepository(ABC):
    """Abstract interface for chat archive persistence."""

    @abstractmethod
    async def list_characters(self) -> list[str]:
        """List the characters that have an archive."""
        pass

    @abstractmethod
    async def get(self, character: str) -> Chat:
        """
        Get the archive for a character.

        Raises:
            NotFoundError: No archive exists for the character
        """
        pass

    @abstractmethod
    async def create(self, character: str) -> Chat:
        """
        Create an empty archive.

        Raises:
            ConflictError: An archive already exists
        """
        pass

    @abstractmethod
    async def update(self, character: str, update: UpdateChatRequest) -> Chat:
        """Rename an archive. Raises NotFoundError or ConflictError."""
        pass

    @abstractmethod
    async def delete(self, character: str) -> None:
        """Delete the whole archive. Raises NotFoundError."""
        pass

    @abstractmethod
    async def add_message(self, character: str, message: AddMessageRequest) -> Chat:
        """Append a message, creating the archive if needed."""
        pass

    @abstractmethod
    async def update_message(
        self, character: str, index: int, update: UpdateMessageRequest
    ) -> Chat:
        """Update the message at ``index``. Raises NotFoundError."""
        pass

    @abstractmethod
    async def mark_message_read(self, character: str, index: int) -> Chat:
        """Set ``read`` on the message at ``index``. Raises NotFoundError."""
        pass

    @abstractmethod
    async def mark_all_read(self, character: str) -> Chat:
        """Set ``read`` on every message. Raises NotFoundError."""
        pass

    @abstractmethod
    async def delete_message(self, character: str, index: int) -> Chat:
        """
        Remove the message at ``index``; later messages shift down by one.

        Raises:
            NotFoundError: Unknown character or index out of range
        """
        pass
