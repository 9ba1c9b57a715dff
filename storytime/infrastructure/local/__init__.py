"""In-memory implementations used by the local reference backend."""

from storytime.infrastructure.local.character_repository import InMemoryCharacterRepository
from storytime.infrastructure.local.chat_repository import InMemoryChatRepository
from storytime.infrastructure.local.job_repository import InMemoryJobRepository
from storytime.infrastructure.local.message_generator import TemplateMessageGenerator
from storytime.infrastructure.local.prompt_repository import InMemoryPromptRepository

__all__ = [
    "InMemoryCharacterRepository",
    "InMemoryPromptRepository",
    "InMemoryJobRepository",
    "InMemoryChatRepository",
    "TemplateMessageGenerator",
]
