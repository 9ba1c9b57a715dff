"""
HTTP implementation of the prompt repository.
"""

from __future__ import annotations

from storytime.infrastructure.remote.api_client import ApiClient
from storytime.interfaces.prompt_repository import IPromptRepository
from storytime.models.prompt import Prompt, PromptCreate, PromptUpdate
from storytime.services import addressing
from storytime.utils.slug import require_slug


class HttpPromptRepository(IPromptRepository):
    """Prompts served by ``/api/prompts``."""

    def __init__(self, client: ApiClient):
        self._client = client

    async def list(self) -> list[Prompt]:
        data = await self._client.request(
            "GET", addressing.prompts_path(), action="fetch prompts", require_data=False
        )
        return [Prompt.model_validate(item) for item in data or []]

    async def get(self, title: str) -> Prompt:
        data = await self._client.request(
            "GET",
            addressing.prompt_path(title),
            action="fetch prompt",
            not_found=f"Prompt '{title}' not found",
        )
        return Prompt.model_validate(data)

    async def create(self, data: PromptCreate) -> Prompt:
        require_slug(data.title, "prompt")
        created = await self._client.request(
            "POST",
            addressing.prompts_path(),
            action="create prompt",
            json=data.model_dump(mode="json", by_alias=True),
            conflict=f"Prompt '{data.title}' already exists",
        )
        return Prompt.model_validate(created)

    async def update(self, title: str, update: PromptUpdate) -> Prompt:
        updated = await self._client.request(
            "PUT",
            addressing.prompt_path(title),
            action="update prompt",
            json=update.model_dump(mode="json", by_alias=True, exclude_unset=True),
            not_found=f"Prompt '{title}' not found",
        )
        return Prompt.model_validate(updated)

    async def delete(self, title: str) -> None:
        await self._client.request(
            "DELETE",
            addressing.prompt_path(title),
            action="delete prompt",
            require_data=False,
            not_found=f"Prompt '{title}' not found",
        )
