"""
Prompt models.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PromptBase(BaseModel):
    description: str = ""
    context: str = ""
    setup: list[str] = Field(default_factory=list, description="Ordered generation steps")
    create_audio: bool = False
    create_images: bool = False


class PromptCreate(PromptBase):
    """Create a new prompt."""

    title: str = Field(..., min_length=1, max_length=200)


class PromptUpdate(BaseModel):
    """Partial update; the title cannot change."""

    description: Optional[str] = None
    context: Optional[str] = None
    setup: Optional[list[str]] = None
    create_audio: Optional[bool] = None
    create_images: Optional[bool] = None


class Prompt(PromptBase):
    """Prompt with its display title."""

    title: str
