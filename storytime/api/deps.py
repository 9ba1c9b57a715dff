"""
Dependency injection for API endpoints and client services.

The routes always serve the in-memory stores. Client services pick their
repositories from ENVIRONMENT: "remote" talks HTTP to API_BASE_URL, anything
else uses the in-process stores directly.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends

from storytime.core.config import get_settings
from storytime.infrastructure.local.character_repository import InMemoryCharacterRepository
from storytime.infrastructure.local.chat_repository import InMemoryChatRepository
from storytime.infrastructure.local.job_repository import InMemoryJobRepository
from storytime.infrastructure.local.message_generator import TemplateMessageGenerator
from storytime.infrastructure.local.prompt_repository import InMemoryPromptRepository
from storytime.interfaces.character_repository import ICharacterRepository
from storytime.interfaces.chat_repository import IChatRepository
from storytime.interfaces.message_generator import IMessageGenerator
from storytime.interfaces.prompt_repository import IPromptRepository
from storytime.services.background_scheduler import BackgroundScheduler
from storytime.services.chat_archive_service import ChatArchiveService
from storytime.services.job_runner import JobRunner
from storytime.services.job_service import JobService

if TYPE_CHECKING:
    from storytime.infrastructure.remote import ApiClient


# ===========================================
# Backend stores
# ===========================================


@lru_cache()
def get_character_repository() -> InMemoryCharacterRepository:
    """Get character repository instance."""
    return InMemoryCharacterRepository()


@lru_cache()
def get_prompt_repository() -> InMemoryPromptRepository:
    """Get prompt repository instance."""
    return InMemoryPromptRepository()


@lru_cache()
def get_chat_repository() -> InMemoryChatRepository:
    """Get chat archive repository instance."""
    return InMemoryChatRepository()


@lru_cache()
def get_message_generator() -> IMessageGenerator:
    """Get message generator instance."""
    return TemplateMessageGenerator()


@lru_cache()
def get_job_runner() -> JobRunner:
    """Get job runner instance."""
    return JobRunner(
        character_repo=get_character_repository(),
        prompt_repo=get_prompt_repository(),
        chat_repo=get_chat_repository(),
        generator=get_message_generator(),
    )


@lru_cache()
def get_job_repository() -> InMemoryJobRepository:
    """Get job repository instance."""
    return InMemoryJobRepository(runner=get_job_runner())


@lru_cache()
def get_background_scheduler() -> BackgroundScheduler:
    """Get the background scheduler instance."""
    return BackgroundScheduler(job_repo=get_job_repository())


def reset_dependencies() -> None:
    """Drop every cached instance so the next request starts from empty stores."""
    for factory in (
        get_character_repository,
        get_prompt_repository,
        get_chat_repository,
        get_message_generator,
        get_job_runner,
        get_job_repository,
        get_background_scheduler,
    ):
        factory.cache_clear()


# ===========================================
# Client services
# ===========================================


@lru_cache()
def get_api_client() -> "ApiClient":
    """Get the shared HTTP client for the remote backend."""
    from storytime.infrastructure.remote import ApiClient

    return ApiClient()


async def close_api_client() -> None:
    """Close the shared HTTP client if one was opened."""
    if get_api_client.cache_info().currsize:
        await get_api_client().aclose()
        get_api_client.cache_clear()


def get_chat_archive_service() -> ChatArchiveService:
    """Chat archive manager wired for the current environment."""
    if get_settings().is_remote:
        from storytime.infrastructure.remote import HttpChatRepository

        return ChatArchiveService(HttpChatRepository(get_api_client()))
    return ChatArchiveService(get_chat_repository())


def get_job_service() -> JobService:
    """Job service wired for the current environment."""
    if get_settings().is_remote:
        from storytime.infrastructure.remote import HttpJobRepository

        return JobService(HttpJobRepository(get_api_client()))
    return JobService(get_job_repository())


# ===========================================
# Type aliases for dependency injection
# ===========================================

CharacterRepo = Annotated[ICharacterRepository, Depends(get_character_repository)]
PromptRepo = Annotated[IPromptRepository, Depends(get_prompt_repository)]
ChatRepo = Annotated[IChatRepository, Depends(get_chat_repository)]
JobRepo = Annotated[InMemoryJobRepository, Depends(get_job_repository)]
Runner = Annotated[JobRunner, Depends(get_job_runner)]
Scheduler = Annotated[BackgroundScheduler, Depends(get_background_scheduler)]
