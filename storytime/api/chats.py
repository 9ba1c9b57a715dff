"""
Chat archive API endpoints.

Archives are addressed by the slug of the character name; messages by their
index in the archive.
"""

from fastapi import APIRouter, status

from storytime.api.deps import CharacterRepo, ChatRepo
from storytime.api.responses import ok
from storytime.interfaces.character_repository import ICharacterRepository
from storytime.interfaces.chat_repository import IChatRepository
from storytime.models.chat import (
    AddMessageRequest,
    Chat,
    CreateChatRequest,
    UpdateChatRequest,
    UpdateMessageRequest,
)
from storytime.models.envelope import ApiResponse
from storytime.services.addressing import find_by_slug

router = APIRouter()


async def _archive_name(
    slug: str, chat_repo: IChatRepository, character_repo: ICharacterRepository
) -> str:
    """Canonical name for an archive slug: existing archive, then character, then the slug."""
    match = find_by_slug(slug, await chat_repo.list_characters())
    if match is not None:
        return match
    characters = await character_repo.list()
    return find_by_slug(slug, [c.name for c in characters]) or slug


@router.get("", response_model=ApiResponse[list[str]])
async def list_chats(repo: ChatRepo):
    """List the display names of characters that have an archive."""
    return ok(await repo.list_characters())


@router.post("", response_model=ApiResponse[Chat], status_code=status.HTTP_201_CREATED)
async def create_chat(payload: CreateChatRequest, repo: ChatRepo):
    return ok(await repo.create(payload.character), "Chat created")


@router.get("/{slug}", response_model=ApiResponse[Chat])
async def get_chat(slug: str, repo: ChatRepo):
    return ok(await repo.get(slug))


@router.put("/{slug}", response_model=ApiResponse[Chat])
async def update_chat(slug: str, payload: UpdateChatRequest, repo: ChatRepo):
    """Rename an archive. Fails with 409 if the new name is taken."""
    return ok(await repo.update(slug, payload), "Chat updated")


@router.delete("/{slug}", response_model=ApiResponse[None])
async def delete_chat(slug: str, repo: ChatRepo):
    await repo.delete(slug)
    return ok(message="Chat deleted")


@router.post("/{slug}/messages", response_model=ApiResponse[Chat])
async def add_message(
    slug: str,
    payload: AddMessageRequest,
    repo: ChatRepo,
    character_repo: CharacterRepo,
):
    """Append a message, creating the archive if it does not exist yet."""
    name = await _archive_name(slug, repo, character_repo)
    return ok(await repo.add_message(name, payload), "Message added")


@router.put("/{slug}/messages/{index}", response_model=ApiResponse[Chat])
async def update_message(slug: str, index: int, payload: UpdateMessageRequest, repo: ChatRepo):
    return ok(await repo.update_message(slug, index, payload), "Message updated")


@router.put("/{slug}/messages/{index}/read", response_model=ApiResponse[Chat])
async def mark_message_read(slug: str, index: int, repo: ChatRepo):
    return ok(await repo.mark_message_read(slug, index))


@router.put("/{slug}/read-all", response_model=ApiResponse[Chat])
async def mark_all_read(slug: str, repo: ChatRepo):
    return ok(await repo.mark_all_read(slug))


@router.delete("/{slug}/messages/{index}", response_model=ApiResponse[Chat])
async def delete_message(slug: str, index: int, repo: ChatRepo):
    """Delete one message; later messages shift down by one."""
    return ok(await repo.delete_message(slug, index), "Message deleted")
