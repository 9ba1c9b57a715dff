"""
Application configuration using Pydantic Settings.

The ENVIRONMENT variable selects which repository implementations are wired:
"local" serves the in-memory reference backend, "remote" talks to API_BASE_URL.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Environment
    # ===========================================
    ENVIRONMENT: Literal["local", "remote", "test"] = "local"
    DEBUG: bool = True

    # ===========================================
    # Backend API (client side)
    # ===========================================
    API_BASE_URL: str = "http://localhost:8000"
    REQUEST_TIMEOUT_SECONDS: float = 30.0

    # ===========================================
    # Logging
    # ===========================================
    LOG_LEVEL: str = "INFO"

    # ===========================================
    # Server (local reference backend)
    # ===========================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )

    # ===========================================
    # Scheduler (server side only)
    # ===========================================
    SCHEDULER_ENABLED: bool = True

    @property
    def is_remote(self) -> bool:
        """Check if the client talks to a remote backend."""
        return self.ENVIRONMENT == "remote"

    @property
    def is_test(self) -> bool:
        """Check if running under the test suite."""
        return self.ENVIRONMENT == "test"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
