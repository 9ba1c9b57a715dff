"""
Response envelope used by every API endpoint.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """``{success, data?, message}`` wrapper."""

    success: bool
    data: Optional[T] = None
    message: str = ""
