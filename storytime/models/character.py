"""
Character models.

``name`` is the identity of a character; its slug is derived for addressing
and never stored.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Voice(BaseModel):
    """TTS voice parameters, passed through to the speech service untouched."""

    model_config = ConfigDict(populate_by_name=True)

    temperature: float = 0.8
    exaggeration: float = 0.4
    cfg_weight: float = Field(0.5, alias="cfgWeight")
    speed_factor: float = Field(1.0, alias="speedFactor")
    voice_name: str = Field("default.wav", alias="voiceName")


class CharacterBase(BaseModel):
    description: str = ""
    personality: str = ""
    background: str = ""
    voice: Optional[Voice] = None


class CharacterCreate(CharacterBase):
    """Create a new character."""

    name: str = Field(..., min_length=1, max_length=200)


class CharacterUpdate(BaseModel):
    """Partial update; the name cannot change."""

    description: Optional[str] = None
    personality: Optional[str] = None
    background: Optional[str] = None
    voice: Optional[Voice] = None


class Character(CharacterBase):
    """Character with its display name."""

    name: str
