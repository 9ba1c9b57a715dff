"""In-memory prompt repository implementation."""

from __future__ import annotations

from storytime.core.exceptions import ConflictError, NotFoundError
from storytime.interfaces.prompt_repository import IPromptRepository
from storytime.models.prompt import Prompt, PromptCreate, PromptUpdate
from storytime.utils.slug import require_slug


class InMemoryPromptRepository(IPromptRepository):
    """In-memory implementation of prompt repository, keyed by title slug."""

    def __init__(self):
        self._prompts: dict[str, Prompt] = {}

    async def list(self) -> list[Prompt]:
        return sorted(self._prompts.values(), key=lambda p: p.title)

    async def get(self, title: str) -> Prompt:
        prompt = self._prompts.get(require_slug(title, "prompt"))
        if prompt is None:
            raise NotFoundError(f"Prompt '{title}' not found")
        return prompt

    async def create(self, data: PromptCreate) -> Prompt:
        slug = require_slug(data.title, "prompt")
        if slug in self._prompts:
            raise ConflictError(f"Prompt '{data.title}' already exists")
        prompt = Prompt.model_validate(data.model_dump())
        self._prompts[slug] = prompt
        return prompt

    async def update(self, title: str, update: PromptUpdate) -> Prompt:
        existing = await self.get(title)
        changes = {
            field: getattr(update, field)
            for field in update.model_fields_set
            if getattr(update, field) is not None
        }
        updated = existing.model_copy(update=changes)
        self._prompts[require_slug(existing.title, "prompt")] = updated
        return updated

    async def delete(self, title: str) -> None:
        slug = require_slug(title, "prompt")
        if slug not in self._prompts:
            raise NotFoundError(f"Prompt '{title}' not found")
        del self._prompts[slug]
