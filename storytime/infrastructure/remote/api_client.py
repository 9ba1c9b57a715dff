"""
HTTP client for the storytime backend.

Unwraps the ``{success, data, message}`` envelope and maps failures onto the
application exceptions. Nothing is retried here; retries are a caller concern.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from storytime.core.config import get_settings
from storytime.core.exceptions import (
    ConflictError,
    MalformedResponseError,
    NotFoundError,
    TransportError,
)
from storytime.core.logger import setup_logger
from storytime.models.envelope import ApiResponse

logger = setup_logger(__name__)


class ApiClient:
    """Thin async wrapper around httpx for envelope-style JSON APIs."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        action: str,
        json: Any = None,
        require_data: bool = True,
        not_found: Optional[str] = None,
        conflict: Optional[str] = None,
    ) -> Any:
        """
        Send a request and return the envelope's ``data``.

        Args:
            method: HTTP method
            path: Request path from the addressing module
            action: Short description used in error messages ("fetch chat")
            json: Optional JSON body
            require_data: Raise MalformedResponseError when ``data`` is absent
            not_found: Message for a 404, defaults to the server's message
            conflict: Message for a 409, defaults to the server's message

        Raises:
            NotFoundError: 404
            ConflictError: 409
            TransportError: Any other non-2xx, or a network failure
            MalformedResponseError: ``success`` is false or ``data`` is missing
        """
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise TransportError(f"Failed to {action}: {e}") from e

        if response.is_error:
            self._raise_for_status(response, action, not_found, conflict)

        envelope = self._parse_envelope(response, action)
        if not envelope.success:
            raise MalformedResponseError(envelope.message or f"Failed to {action}")
        if require_data and envelope.data is None:
            raise MalformedResponseError(
                envelope.message or f"Failed to {action}: no data returned"
            )
        return envelope.data

    def _raise_for_status(
        self,
        response: httpx.Response,
        action: str,
        not_found: Optional[str],
        conflict: Optional[str],
    ) -> None:
        server_message = self._server_message(response)
        if response.status_code == 404:
            raise NotFoundError(not_found or server_message or f"Failed to {action}: not found")
        if response.status_code == 409:
            raise ConflictError(conflict or server_message or f"Failed to {action}: already exists")

        logger.error(
            f"{response.request.method} {response.request.url.path} -> "
            f"{response.status_code} {response.reason_phrase}"
        )
        raise TransportError(
            f"Failed to {action}: {response.reason_phrase}",
            status_code=response.status_code,
            details=server_message,
        )

    @staticmethod
    def _server_message(response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            message = body.get("message") or body.get("detail")
            if isinstance(message, str) and message:
                return message
        return None

    @staticmethod
    def _parse_envelope(response: httpx.Response, action: str) -> ApiResponse[Any]:
        try:
            return ApiResponse[Any].model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise MalformedResponseError(
                f"Failed to {action}: response is not a valid envelope",
                details=response.text[:500],
            ) from e
