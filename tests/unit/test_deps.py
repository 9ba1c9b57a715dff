"""
Unit tests for client service wiring.
"""

import pytest

from storytime.api import deps
from storytime.core.config import Settings
from storytime.infrastructure.local import InMemoryChatRepository, InMemoryJobRepository
from storytime.infrastructure.remote import HttpChatRepository, HttpJobRepository


@pytest.fixture
def remote_settings(monkeypatch):
    settings = Settings(ENVIRONMENT="remote", API_BASE_URL="http://backend.test")
    monkeypatch.setattr(deps, "get_settings", lambda: settings)
    deps.get_api_client.cache_clear()
    yield settings
    deps.get_api_client.cache_clear()


class TestRemoteServices:
    @pytest.mark.asyncio
    async def test_services_share_one_client(self, remote_settings):
        chat_service = deps.get_chat_archive_service()
        job_service = deps.get_job_service()

        assert isinstance(chat_service.chat_repo, HttpChatRepository)
        assert isinstance(job_service.job_repo, HttpJobRepository)
        assert chat_service.chat_repo._client is job_service.job_repo._client
        assert deps.get_api_client.cache_info().currsize == 1

        await deps.close_api_client()

    @pytest.mark.asyncio
    async def test_repeated_calls_reuse_client(self, remote_settings):
        first = deps.get_chat_archive_service().chat_repo._client
        second = deps.get_chat_archive_service().chat_repo._client

        assert first is second

        await deps.close_api_client()

    @pytest.mark.asyncio
    async def test_close_api_client_closes_and_forgets(self, remote_settings):
        client = deps.get_api_client()

        await deps.close_api_client()

        assert client._client.is_closed
        assert deps.get_api_client.cache_info().currsize == 0
        assert deps.get_api_client() is not client
        await deps.close_api_client()

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self, remote_settings):
        await deps.close_api_client()

        assert deps.get_api_client.cache_info().currsize == 0


class TestLocalServices:
    def test_services_use_in_process_stores(self):
        deps.reset_dependencies()
        deps.get_api_client.cache_clear()

        chat_service = deps.get_chat_archive_service()
        job_service = deps.get_job_service()

        assert isinstance(chat_service.chat_repo, InMemoryChatRepository)
        assert isinstance(job_service.job_repo, InMemoryJobRepository)
        assert deps.get_api_client.cache_info().currsize == 0
        deps.reset_dependencies()
