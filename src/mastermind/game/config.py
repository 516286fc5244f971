"""Configuration management using pydantic-settings.

Settings come from environment variables, optionally through ``.env`` and
``.env.local`` (local overrides shared). Every field names its environment
variable explicitly via validation_alias.

Usage:
    from mastermind.game.config import settings
    print(settings.base_url)
"""

import logging
from typing import Literal, Self

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

type LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    All variables use the MASTERMIND_ prefix.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def warn_insecure_server(self) -> Self:
        """Warn at startup if the server is reached over plain HTTP."""
        if self.base_url.startswith("http://"):
            logger.warning("Game server %s is not using TLS", self.base_url)
        return self

    # ==========================================================================
    # SERVER
    # ==========================================================================

    base_url: str = Field(
        default="https://mastermind.darkube.app",
        validation_alias="MASTERMIND_BASE_URL",
        description="Base URL of the game server",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        validation_alias="MASTERMIND_HTTP_TIMEOUT_SECONDS",
        description="Timeout for HTTP requests (None = httpx default)",
    )

    # ==========================================================================
    # GAME RULES
    # ==========================================================================

    max_attempts: int = Field(
        default=10,
        ge=1,
        validation_alias="MASTERMIND_MAX_ATTEMPTS",
        description="Scored guesses allowed per game",
    )

    exit_keyword: str = Field(
        default="exit",
        min_length=1,
        validation_alias="MASTERMIND_EXIT_KEYWORD",
        description="Command that ends the game (case-insensitive)",
    )

    # ==========================================================================
    # CLEANUP
    # ==========================================================================

    cleanup_attempts: int = Field(
        default=1,
        ge=1,
        validation_alias="MASTERMIND_CLEANUP_ATTEMPTS",
        description="Delete attempts on transport failure (1 = no retry)",
    )

    cleanup_retry_wait_seconds: float = Field(
        default=1.0,
        ge=0,
        validation_alias="MASTERMIND_CLEANUP_RETRY_WAIT_SECONDS",
        description="Initial backoff between delete attempts",
    )

    # ==========================================================================
    # LOGGING
    # ==========================================================================

    log_level: LogLevel = Field(
        default="WARNING",
        validation_alias="MASTERMIND_LOG_LEVEL",
        description="Root logging level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any casing."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


# Singleton instance
settings = Settings()
