"""
Chat archive service.

Owns the per-character message log on the client side: append, read-state
changes, index-addressed deletes, and the chat list summaries.
"""

from __future__ import annotations

from typing import Optional

from storytime.core.config import get_settings
from storytime.core.logger import setup_logger
from storytime.interfaces.chat_repository import IChatRepository
from storytime.models.chat import (
    AddMessageRequest,
    Chat,
    ChatListItem,
    Message,
    UpdateChatRequest,
    UpdateMessageRequest,
)
from storytime.services.addressing import resolve_display_name
from storytime.utils.audio_utils import AudioPart, resolve_audio

logger = setup_logger(__name__)

EMPTY_ARCHIVE_PLACEHOLDER = "No messages yet"
LOAD_ERROR_PLACEHOLDER = "Error loading messages"


class ChatArchiveService:
    """Client-side manager for chat archives.

    Message indices are positional. Any append or delete made by another
    session between a fetch and an index-addressed call shifts them; the
    backend applies whatever arrives last.
    """

    def __init__(self, chat_repo: IChatRepository, audio_base_url: Optional[str] = None):
        self.chat_repo = chat_repo
        self.audio_base_url = audio_base_url or get_settings().API_BASE_URL

    async def get(self, character: str) -> Chat:
        return await self.chat_repo.get(character)

    async def create(self, character: str) -> Chat:
        return await self.chat_repo.create(character)

    async def rename(self, character: str, new_character: str) -> Chat:
        return await self.chat_repo.update(
            character, UpdateChatRequest(character=new_character)
        )

    async def append(
        self,
        character: str,
        text: Optional[list[str]] = None,
        audio: Optional[list[str]] = None,
        images: Optional[list[str]] = None,
    ) -> Chat:
        """Append one message built from the given parts and return the archive."""
        message = AddMessageRequest(
            text=list(text or []),
            audio=list(audio or []),
            images=list(images or []),
        )
        return await self.chat_repo.add_message(character, message)

    async def set_read(self, character: str, index: int, value: bool = True) -> Chat:
        """Set the read flag of the message at ``index``.

        Raises:
            NotFoundError: Unknown character or index
        """
        if value:
            return await self.chat_repo.mark_message_read(character, index)
        return await self.chat_repo.update_message(
            character, index, UpdateMessageRequest(read=False)
        )

    async def set_all_read(self, character: str) -> Chat:
        return await self.chat_repo.mark_all_read(character)

    async def delete_message(self, character: str, index: int) -> Chat:
        return await self.chat_repo.delete_message(character, index)

    async def delete(self, character: str) -> None:
        await self.chat_repo.delete(character)

    def audio_parts(self, character: str, message: Message) -> list[AudioPart]:
        """Playable audio of a message. Inline parts that fail to decode are skipped."""
        parts: list[AudioPart] = []
        for index, value in enumerate(message.audio):
            part = resolve_audio(value, self.audio_base_url, character)
            if part is None:
                logger.warning(f"Skipping undecodable audio part {index} for {character}")
                continue
            parts.append(part)
        return parts

    async def resolve_character(self, slug: str) -> str:
        """Display name for a chat slug, approximated if no archive matches."""
        known = await self.chat_repo.list_characters()
        return resolve_display_name(slug, known)

    async def list_summaries(self) -> list[ChatListItem]:
        """Summarise every archive for the chat list.

        A failed fetch degrades only its own row; the list is always returned
        in full, sorted by character name (case-sensitive).
        """
        items: list[ChatListItem] = []
        for name in await self.chat_repo.list_characters():
            try:
                chat = await self.chat_repo.get(name)
            except Exception as e:
                logger.warning(f"Failed to fetch chat for {name}: {e}")
                items.append(
                    ChatListItem(
                        character=name,
                        last_message=LOAD_ERROR_PLACEHOLDER,
                        message_count=0,
                        unread_count=0,
                    )
                )
                continue
            items.append(summarize(chat))

        items.sort(key=lambda item: item.character)
        return items


def summarize(chat: Chat) -> ChatListItem:
    """Reduce an archive to its list row."""
    last = chat.messages[-1] if chat.messages else None
    last_text = last.joined_text() if last else ""
    return ChatListItem(
        character=chat.character,
        last_message=last_text or EMPTY_ARCHIVE_PLACEHOLDER,
        message_count=len(chat.messages),
        unread_count=sum(1 for message in chat.messages if message.is_unread),
        last_activity=last.timestamp if last else None,
    )
