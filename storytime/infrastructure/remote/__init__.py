"""HTTP implementations of the repository interfaces."""

from storytime.infrastructure.remote.api_client import ApiClient
from storytime.infrastructure.remote.character_repository import HttpCharacterRepository
from storytime.infrastructure.remote.chat_repository import HttpChatRepository
from storytime.infrastructure.remote.job_repository import HttpJobRepository
from storytime.infrastructure.remote.prompt_repository import HttpPromptRepository

__all__ = [
    "ApiClient",
    "HttpCharacterRepository",
    "HttpPromptRepository",
    "HttpJobRepository",
    "HttpChatRepository",
]
