"""
Job models.

A job pairs characters with prompts on a cron cadence. Jobs created by the
current backend carry an opaque ``id``; legacy jobs are only addressable
through the composite ``{character}-{prompt}`` slug.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _lift_legacy_pair(data: Any) -> Any:
    """Accept the legacy singular ``character``/``prompt`` payload shape."""
    if not isinstance(data, dict):
        return data
    data = dict(data)
    if "characters" not in data and "character" in data:
        character = data.pop("character")
        data["characters"] = [character] if character else []
    if "prompts" not in data and "prompt" in data:
        prompt = data.pop("prompt")
        data["prompts"] = [prompt] if prompt else []
    return data


class JobBase(BaseModel):
    """Base fields for jobs."""

    model_config = ConfigDict(populate_by_name=True)

    characters: list[str] = Field(default_factory=list)
    prompts: list[str] = Field(default_factory=list)
    cadence: str = Field(..., min_length=1, description="Cron expression, interpreted by the backend")
    prompt_override: Optional[str] = Field(
        None,
        alias="prompt-override",
        description="Replaces the prompt body for this job only",
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_legacy_pair(cls, data: Any) -> Any:
        return _lift_legacy_pair(data)


class JobCreate(JobBase):
    """Create a new job."""

    pass


class JobUpdate(JobBase):
    """Full replacement of a job (PUT semantics)."""

    id: Optional[UUID] = None


class Job(JobBase):
    """Job definition. ``id`` is absent on legacy records."""

    id: Optional[UUID] = None

    @property
    def character(self) -> Optional[str]:
        return self.characters[0] if self.characters else None

    @property
    def prompt(self) -> Optional[str]:
        return self.prompts[0] if self.prompts else None


class RunJobRequest(BaseModel):
    """Body-addressed run of a job that may not be persisted."""

    job: Job
    save_to_chat_history: bool = True


@dataclass(frozen=True)
class JobById:
    """Address a job by its server-issued ID."""

    id: str


@dataclass(frozen=True)
class JobByLegacyComposite:
    """Address a job by the legacy ``(character, prompt)`` pair."""

    character: str
    prompt: str


JobRef = Union[JobById, JobByLegacyComposite]


def job_ref_for(job: Job) -> JobRef:
    """Reference for a fetched job: its ID when known, else the legacy pair."""
    if job.id is not None:
        return JobById(str(job.id))
    return JobByLegacyComposite(job.character or "", job.prompt or "")
