"""
Shared fixtures.

ENVIRONMENT is forced to "test" before anything from storytime is imported
so the cached settings disable the background scheduler.
"""

import os

os.environ["ENVIRONMENT"] = "test"

import random

import httpx
import pytest

from storytime.api.deps import reset_dependencies
from storytime.infrastructure.local import (
    InMemoryCharacterRepository,
    InMemoryChatRepository,
    InMemoryJobRepository,
    InMemoryPromptRepository,
    TemplateMessageGenerator,
)
from storytime.infrastructure.remote import ApiClient
from storytime.services.job_runner import JobRunner


@pytest.fixture
def character_repo():
    return InMemoryCharacterRepository()


@pytest.fixture
def prompt_repo():
    return InMemoryPromptRepository()


@pytest.fixture
def chat_repo():
    return InMemoryChatRepository()


@pytest.fixture
def runner(character_repo, prompt_repo, chat_repo):
    return JobRunner(
        character_repo=character_repo,
        prompt_repo=prompt_repo,
        chat_repo=chat_repo,
        generator=TemplateMessageGenerator(),
        rng=random.Random(0),
    )


@pytest.fixture
def job_repo(runner):
    return InMemoryJobRepository(runner=runner)


@pytest.fixture
def app():
    """Fresh backend app with empty stores."""
    from storytime.main import create_app

    reset_dependencies()
    yield create_app()
    reset_dependencies()


@pytest.fixture
async def api_client(app):
    """ApiClient wired to the in-process backend."""
    client = ApiClient(
        base_url="http://testserver",
        transport=httpx.ASGITransport(app=app),
    )
    yield client
    await client.aclose()
