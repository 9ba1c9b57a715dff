"""In-memory chat archive repository implementation."""

from __future__ import annotations

from datetime import datetime, timezone

from storytime.core.exceptions import ConflictError, NotFoundError, ValidationError
from storytime.interfaces.chat_repository import IChatRepository
from storytime.models.chat import (
    AddMessageRequest,
    Chat,
    Message,
    UpdateChatRequest,
    UpdateMessageRequest,
)
from storytime.utils.slug import require_slug


class InMemoryChatRepository(IChatRepository):
    """In-memory implementation of chat archive repository.

    Archives are keyed by the slug of the character name, the same key the
    HTTP routes receive in their path.
    """

    def __init__(self):
        self._chats: dict[str, Chat] = {}

    def _key(self, character: str) -> str:
        return require_slug(character, "chat")

    def _require(self, character: str) -> Chat:
        chat = self._chats.get(self._key(character))
        if chat is None:
            raise NotFoundError(f"Chat for '{character}' not found")
        return chat

    @staticmethod
    def _require_message(chat: Chat, index: int) -> Message:
        if index < 0 or index >= len(chat.messages):
            raise NotFoundError(
                f"Message {index} not found in chat for '{chat.character}'"
            )
        return chat.messages[index]

    async def list_characters(self) -> list[str]:
        return sorted(chat.character for chat in self._chats.values())

    async def get(self, character: str) -> Chat:
        return self._require(character).model_copy(deep=True)

    async def create(self, character: str) -> Chat:
        key = self._key(character)
        if key in self._chats:
            raise ConflictError(f"Chat for '{character}' already exists")
        chat = Chat(character=character)
        self._chats[key] = chat
        return chat.model_copy(deep=True)

    async def update(self, character: str, update: UpdateChatRequest) -> Chat:
        chat = self._require(character)
        if update.character is None or update.character == chat.character:
            return chat.model_copy(deep=True)

        new_key = self._key(update.character)
        old_key = self._key(character)
        if new_key != old_key and new_key in self._chats:
            raise ConflictError(f"Chat for '{update.character}' already exists")

        del self._chats[old_key]
        chat.character = update.character
        self._chats[new_key] = chat
        return chat.model_copy(deep=True)

    async def delete(self, character: str) -> None:
        key = self._key(character)
        if key not in self._chats:
            raise NotFoundError(f"Chat for '{character}' not found")
        del self._chats[key]

    async def add_message(self, character: str, message: AddMessageRequest) -> Chat:
        key = self._key(character)
        chat = self._chats.get(key)
        if chat is None:
            chat = Chat(character=character)
            self._chats[key] = chat

        chat.messages.append(
            Message(
                text=list(message.text),
                audio=list(message.audio),
                images=list(message.images),
                read=message.read if message.read is not None else False,
                timestamp=message.timestamp or datetime.now(timezone.utc),
            )
        )
        return chat.model_copy(deep=True)

    async def update_message(
        self, character: str, index: int, update: UpdateMessageRequest
    ) -> Chat:
        chat = self._require(character)
        message = self._require_message(chat, index)
        changes = update.model_dump(exclude_none=True)
        if not changes:
            raise ValidationError("No message fields to update")
        chat.messages[index] = message.model_copy(update=changes)
        return chat.model_copy(deep=True)

    async def mark_message_read(self, character: str, index: int) -> Chat:
        chat = self._require(character)
        self._require_message(chat, index).read = True
        return chat.model_copy(deep=True)

    async def mark_all_read(self, character: str) -> Chat:
        chat = self._require(character)
        for message in chat.messages:
            message.read = True
        return chat.model_copy(deep=True)

    async def delete_message(self, character: str, index: int) -> Chat:
        chat = self._require(character)
        self._require_message(chat, index)
        chat.messages.pop(index)
        return chat.model_copy(deep=True)
