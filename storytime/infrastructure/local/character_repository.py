"""In-memory character repository implementation."""

from __future__ import annotations

from storytime.core.exceptions import ConflictError, NotFoundError
from storytime.interfaces.character_repository import ICharacterRepository
from storytime.models.character import Character, CharacterCreate, CharacterUpdate
from storytime.utils.slug import require_slug


class InMemoryCharacterRepository(ICharacterRepository):
    """In-memory implementation of character repository.

    Characters are keyed by the slug of their name, so two names that slug
    alike cannot coexist.
    """

    def __init__(self):
        self._characters: dict[str, Character] = {}

    async def list(self) -> list[Character]:
        return sorted(self._characters.values(), key=lambda c: c.name)

    async def get(self, name: str) -> Character:
        character = self._characters.get(require_slug(name, "character"))
        if character is None:
            raise NotFoundError(f"Character '{name}' not found")
        return character

    async def create(self, data: CharacterCreate) -> Character:
        slug = require_slug(data.name, "character")
        if slug in self._characters:
            raise ConflictError(f"Character '{data.name}' already exists")
        character = Character.model_validate(data.model_dump())
        self._characters[slug] = character
        return character

    async def update(self, name: str, update: CharacterUpdate) -> Character:
        existing = await self.get(name)
        changes = {
            field: getattr(update, field)
            for field in update.model_fields_set
            if getattr(update, field) is not None
        }
        updated = existing.model_copy(update=changes)
        self._characters[require_slug(existing.name, "character")] = updated
        return updated

    async def delete(self, name: str) -> None:
        slug = require_slug(name, "character")
        if slug not in self._characters:
            raise NotFoundError(f"Character '{name}' not found")
        del self._characters[slug]
