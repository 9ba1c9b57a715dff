"""
Character API endpoints.

Characters are addressed by the slug of their name.
"""

from fastapi import APIRouter, status

from storytime.api.deps import CharacterRepo
from storytime.api.responses import ok
from storytime.models.character import Character, CharacterCreate, CharacterUpdate
from storytime.models.envelope import ApiResponse

router = APIRouter()


@router.get("", response_model=ApiResponse[list[Character]])
async def list_characters(repo: CharacterRepo):
    """List all characters."""
    return ok(await repo.list())


@router.post("", response_model=ApiResponse[Character], status_code=status.HTTP_201_CREATED)
async def create_character(payload: CharacterCreate, repo: CharacterRepo):
    """Create a character. Fails with 409 if its slug is taken."""
    return ok(await repo.create(payload), "Character created")


@router.get("/{slug}", response_model=ApiResponse[Character])
async def get_character(slug: str, repo: CharacterRepo):
    return ok(await repo.get(slug))


@router.put("/{slug}", response_model=ApiResponse[Character])
async def update_character(slug: str, payload: CharacterUpdate, repo: CharacterRepo):
    return ok(await repo.update(slug, payload), "Character updated")


@router.delete("/{slug}", response_model=ApiResponse[None])
async def delete_character(slug: str, repo: CharacterRepo):
    await repo.delete(slug)
    return ok(message="Character deleted")
