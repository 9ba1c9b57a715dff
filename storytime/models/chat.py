"""
Chat archive models.

One archive per character. Messages have no IDs: they are addressed by their
position in the archive, so indices fetched earlier go stale as soon as
another session appends or deletes.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Message(BaseModel):
    """One turn: parallel text, audio and image parts.

    ``audio`` holds archive file paths, or base64 payloads for unsaved test
    runs. A missing ``read`` counts as unread.
    """

    text: list[str] = Field(default_factory=list)
    audio: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    read: Optional[bool] = None
    timestamp: Optional[datetime] = None

    @property
    def is_unread(self) -> bool:
        return not self.read

    def joined_text(self) -> str:
        return " ".join(self.text)


class Chat(BaseModel):
    """Ordered message archive for one character."""

    character: str
    messages: list[Message] = Field(default_factory=list)


class CreateChatRequest(BaseModel):
    character: str = Field(..., min_length=1)


class UpdateChatRequest(BaseModel):
    """Rename an archive to another character."""

    character: Optional[str] = None


class AddMessageRequest(BaseModel):
    """Parts for a new message; omitted part lists default to empty."""

    text: list[str] = Field(default_factory=list)
    audio: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    read: Optional[bool] = None
    timestamp: Optional[datetime] = None


class UpdateMessageRequest(BaseModel):
    """Partial message update; only provided fields change."""

    text: Optional[list[str]] = None
    audio: Optional[list[str]] = None
    images: Optional[list[str]] = None
    read: Optional[bool] = None
    timestamp: Optional[datetime] = None


class ChatListItem(BaseModel):
    """Display-only summary of an archive. Never persisted."""

    character: str
    last_message: Optional[str] = None
    message_count: int = 0
    unread_count: Optional[int] = None
    last_activity: Optional[datetime] = None
