"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class StorytimeError(Exception):
    """Base exception for storytime."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(StorytimeError):
    """Resource not found (by slug, ID or message index)."""

    pass


class ConflictError(StorytimeError):
    """Duplicate resource on create or rename."""

    pass


class ValidationError(StorytimeError):
    """Validation error, e.g. an unaddressable empty slug."""

    pass


class TransportError(StorytimeError):
    """Non-2xx response without a more specific mapping, or a network failure."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Any] = None):
        super().__init__(message, details=details)
        self.status_code = status_code


class MalformedResponseError(StorytimeError):
    """Envelope reported failure, or required data was absent."""

    pass
