"""
HTTP implementation of the character repository.
"""

from __future__ import annotations

from storytime.infrastructure.remote.api_client import ApiClient
from storytime.interfaces.character_repository import ICharacterRepository
from storytime.models.character import Character, CharacterCreate, CharacterUpdate
from storytime.services import addressing
from storytime.utils.slug import require_slug


class HttpCharacterRepository(ICharacterRepository):
    """Characters served by ``/api/characters``."""

    def __init__(self, client: ApiClient):
        self._client = client

    async def list(self) -> list[Character]:
        data = await self._client.request(
            "GET", addressing.characters_path(), action="fetch characters", require_data=False
        )
        return [Character.model_validate(item) for item in data or []]

    async def get(self, name: str) -> Character:
        data = await self._client.request(
            "GET",
            addressing.character_path(name),
            action="fetch character",
            not_found=f"Character '{name}' not found",
        )
        return Character.model_validate(data)

    async def create(self, data: CharacterCreate) -> Character:
        require_slug(data.name, "character")
        created = await self._client.request(
            "POST",
            addressing.characters_path(),
            action="create character",
            json=data.model_dump(mode="json", by_alias=True),
            conflict=f"Character '{data.name}' already exists",
        )
        return Character.model_validate(created)

    async def update(self, name: str, update: CharacterUpdate) -> Character:
        updated = await self._client.request(
            "PUT",
            addressing.character_path(name),
            action="update character",
            json=update.model_dump(mode="json", by_alias=True, exclude_unset=True),
            not_found=f"Character '{name}' not found",
        )
        return Character.model_validate(updated)

    async def delete(self, name: str) -> None:
        await self._client.request(
            "DELETE",
            addressing.character_path(name),
            action="delete character",
            require_data=False,
            not_found=f"Character '{name}' not found",
        )
