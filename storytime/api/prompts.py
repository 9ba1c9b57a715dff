"""
Prompt API endpoints.

Prompts are addressed by the slug of their title.
"""

from fastapi import APIRouter, status

from storytime.api.deps import PromptRepo
from storytime.api.responses import ok
from storytime.models.envelope import ApiResponse
from storytime.models.prompt import Prompt, PromptCreate, PromptUpdate

router = APIRouter()


@router.get("", response_model=ApiResponse[list[Prompt]])
async def list_prompts(repo: PromptRepo):
    """List all prompts."""
    return ok(await repo.list())


@router.post("", response_model=ApiResponse[Prompt], status_code=status.HTTP_201_CREATED)
async def create_prompt(payload: PromptCreate, repo: PromptRepo):
    """Create a prompt. Fails with 409 if its slug is taken."""
    return ok(await repo.create(payload), "Prompt created")


@router.get("/{slug}", response_model=ApiResponse[Prompt])
async def get_prompt(slug: str, repo: PromptRepo):
    return ok(await repo.get(slug))


@router.put("/{slug}", response_model=ApiResponse[Prompt])
async def update_prompt(slug: str, payload: PromptUpdate, repo: PromptRepo):
    return ok(await repo.update(slug, payload), "Prompt updated")


@router.delete("/{slug}", response_model=ApiResponse[None])
async def delete_prompt(slug: str, repo: PromptRepo):
    await repo.delete(slug)
    return ok(message="Prompt deleted")
