"""
Template message generator.

Stands in for the backend's language model: each setup step of the prompt
(or the job's override) becomes one line of text, with ``{{char}}`` replaced
by the character's name.
"""

from typing import Optional

from storytime.interfaces.message_generator import IMessageGenerator
from storytime.models.character import Character
from storytime.models.prompt import Prompt
from storytime.services.job_service import effective_instructions

CHARACTER_PLACEHOLDER = "{{char}}"


class TemplateMessageGenerator(IMessageGenerator):
    """Deterministic generator for the local backend and tests."""

    async def generate(
        self,
        character: Character,
        prompt: Prompt,
        prompt_override: Optional[str] = None,
    ) -> list[str]:
        lines: list[str] = []
        for instruction in effective_instructions(prompt, prompt_override):
            for line in instruction.splitlines():
                line = line.replace(CHARACTER_PLACEHOLDER, character.name).strip()
                if line:
                    lines.append(line)

        if not lines:
            lines.append(f"{character.name}: {prompt.title}")
        return lines
