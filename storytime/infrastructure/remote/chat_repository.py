"""
HTTP implementation of the chat archive repository.
"""

from __future__ import annotations

from storytime.infrastructure.remote.api_client import ApiClient
from storytime.interfaces.chat_repository import IChatRepository
from storytime.models.chat import (
    AddMessageRequest,
    Chat,
    CreateChatRequest,
    UpdateChatRequest,
    UpdateMessageRequest,
)
from storytime.services import addressing
from storytime.utils.slug import require_slug


class HttpChatRepository(IChatRepository):
    """Chat archives served by ``/api/chats``."""

    def __init__(self, client: ApiClient):
        self._client = client

    async def list_characters(self) -> list[str]:
        data = await self._client.request("GET", addressing.chats_path(), action="fetch chats")
        return [str(name) for name in data]

    async def get(self, character: str) -> Chat:
        data = await self._client.request(
            "GET",
            addressing.chat_path(character),
            action=f"fetch chat for {character}",
            not_found=f"Chat for character '{character}' not found",
        )
        return Chat.model_validate(data)

    async def create(self, character: str) -> Chat:
        require_slug(character, "chat")
        data = await self._client.request(
            "POST",
            addressing.chats_path(),
            action="create chat",
            json=CreateChatRequest(character=character).model_dump(mode="json"),
            conflict=f"Chat for character '{character}' already exists",
        )
        return Chat.model_validate(data)

    async def update(self, character: str, update: UpdateChatRequest) -> Chat:
        if update.character is not None:
            require_slug(update.character, "chat")
        data = await self._client.request(
            "PUT",
            addressing.chat_path(character),
            action="update chat",
            json=update.model_dump(mode="json", exclude_none=True),
            not_found=f"Chat for character '{character}' not found",
            conflict=f"Chat for character '{update.character}' already exists",
        )
        return Chat.model_validate(data)

    async def delete(self, character: str) -> None:
        await self._client.request(
            "DELETE",
            addressing.chat_path(character),
            action="delete chat",
            require_data=False,
            not_found=f"Chat for character '{character}' not found",
        )

    async def add_message(self, character: str, message: AddMessageRequest) -> Chat:
        data = await self._client.request(
            "POST",
            addressing.chat_messages_path(character),
            action="add message",
            json=message.model_dump(mode="json", exclude_none=True),
        )
        return Chat.model_validate(data)

    async def update_message(
        self, character: str, index: int, update: UpdateMessageRequest
    ) -> Chat:
        data = await self._client.request(
            "PUT",
            addressing.chat_message_path(character, index),
            action="update message",
            json=update.model_dump(mode="json", exclude_none=True),
        )
        return Chat.model_validate(data)

    async def mark_message_read(self, character: str, index: int) -> Chat:
        data = await self._client.request(
            "PUT",
            addressing.chat_message_read_path(character, index),
            action="mark message as read",
        )
        return Chat.model_validate(data)

    async def mark_all_read(self, character: str) -> Chat:
        data = await self._client.request(
            "PUT",
            addressing.chat_read_all_path(character),
            action="mark all messages as read",
            not_found=f"Chat for character '{character}' not found",
        )
        return Chat.model_validate(data)

    async def delete_message(self, character: str, index: int) -> Chat:
        data = await self._client.request(
            "DELETE",
            addressing.chat_message_path(character, index),
            action="delete message",
        )
        return Chat.model_validate(data)
