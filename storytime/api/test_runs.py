"""
Trial run endpoints.

Run an unsaved prompt or character against a saved counterpart. Results are
not saved to chat history unless the request asks for it.
"""

from fastapi import APIRouter

from storytime.api.deps import Runner
from storytime.api.responses import ok
from storytime.models.chat import Message
from storytime.models.envelope import ApiResponse
from storytime.models.test_run import TestCharacterRequest, TestPromptRequest

router = APIRouter()


@router.post("/prompt", response_model=ApiResponse[Message])
async def trial_prompt(payload: TestPromptRequest, runner: Runner):
    message = await runner.trial_prompt(
        payload.prompt, payload.character_name, payload.save_to_chat_history
    )
    return ok(message)


@router.post("/character", response_model=ApiResponse[Message])
async def trial_character(payload: TestCharacterRequest, runner: Runner):
    message = await runner.trial_character(
        payload.character, payload.prompt_name, payload.save_to_chat_history
    )
    return ok(message)
