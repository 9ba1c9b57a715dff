"""Pydantic models shared by the client and the local backend."""

from storytime.models.character import Character, CharacterCreate, CharacterUpdate, Voice
from storytime.models.chat import (
    AddMessageRequest,
    Chat,
    ChatListItem,
    CreateChatRequest,
    Message,
    UpdateChatRequest,
    UpdateMessageRequest,
)
from storytime.models.envelope import ApiResponse
from storytime.models.job import (
    Job,
    JobById,
    JobByLegacyComposite,
    JobCreate,
    JobRef,
    JobUpdate,
    RunJobRequest,
    job_ref_for,
)
from storytime.models.prompt import Prompt, PromptCreate, PromptUpdate
from storytime.models.test_run import TestCharacterRequest, TestPromptRequest

__all__ = [
    "ApiResponse",
    "Character",
    "CharacterCreate",
    "CharacterUpdate",
    "Voice",
    "Prompt",
    "PromptCreate",
    "PromptUpdate",
    "Job",
    "JobCreate",
    "JobUpdate",
    "RunJobRequest",
    "JobRef",
    "JobById",
    "JobByLegacyComposite",
    "job_ref_for",
    "Chat",
    "Message",
    "ChatListItem",
    "CreateChatRequest",
    "UpdateChatRequest",
    "AddMessageRequest",
    "UpdateMessageRequest",
    "TestPromptRequest",
    "TestCharacterRequest",
]
