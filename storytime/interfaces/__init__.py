"""Abstract interfaces for infrastructure abstraction."""

from storytime.interfaces.character_repository import ICharacterRepository
from storytime.interfaces.chat_repository import IChatRepository
from storytime.interfaces.job_repository import IJobRepository
from storytime.interfaces.message_generator import IMessageGenerator
from storytime.interfaces.prompt_repository import IPromptRepository

__all__ = [
    "ICharacterRepository",
    "IPromptRepository",
    "IJobRepository",
    "IChatRepository",
    "IMessageGenerator",
]
