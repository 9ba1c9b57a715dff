"""
Message generator interface.

Produces the text lines of a job run. The backend's language model sits
behind this seam.
"""

from abc import ABC, abstractmethod
from typing import Optional

from storytime.models.character import Character
from storytime.models.prompt import Prompt


class IMessageGenerator(ABC):
    """Abstract interface for generating message text."""

    @abstractmethod
    async def generate(
        self,
        character: Character,
        prompt: Prompt,
        prompt_override: Optional[str] = None,
    ) -> list[str]:
        """
        Generate text lines for a character responding to a prompt.

        Args:
            character: Speaking character
            prompt: Prompt whose setup steps drive generation
            prompt_override: Replaces the prompt body when given

        Returns:
            Non-empty, stripped text lines
        """
        pass
