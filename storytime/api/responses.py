"""
Envelope helpers and exception handlers.

Every response body, success or failure, is ``{success, data, message}``.
"""

from typing import Any, Optional, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from storytime.core.exceptions import (
    ConflictError,
    NotFoundError,
    StorytimeError,
    ValidationError,
)
from storytime.core.logger import setup_logger
from storytime.models.envelope import ApiResponse

logger = setup_logger(__name__)

T = TypeVar("T")


def ok(data: Optional[T] = None, message: str = "") -> ApiResponse[T]:
    return ApiResponse(success=True, data=data, message=message)


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "data": None, "message": message},
    )


_STATUS_BY_ERROR: dict[type[StorytimeError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
}


async def storytime_error_handler(request: Request, exc: StorytimeError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _failure(status_code, exc.message)


async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return _failure(exc.status_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: list[Any] = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    return _failure(
        status.HTTP_400_BAD_REQUEST,
        f"Invalid request: {location} {first.get('msg', '')}".strip(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorytimeError, storytime_error_handler)
    app.add_exception_handler(HTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
