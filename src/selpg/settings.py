"""Runtime settings loaded from `.env` and environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from selpg.exceptions import SettingsError

logger = logging.getLogger(__name__)

_MAX_CHUNK_SIZE = 16 * 1024 * 1024


class Settings(BaseSettings):
    """Package settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    project_name: str = "selpg"

    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Logging level, e.g. 'INFO', 'DEBUG'.",
    )
    log_json: bool = Field(
        default=False,
        validation_alias="LOG_JSON",
        description="Enable JSON formatted logs.",
    )
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="File path for log output.",
    )

    spooler_command: str = Field(
        default="lp",
        validation_alias="SELPG_SPOOLER_COMMAND",
        description="Print spooler executable fed when a destination is given.",
    )
    read_chunk_size: int = Field(
        default=64 * 1024,
        ge=1,
        le=_MAX_CHUNK_SIZE,
        validation_alias="SELPG_READ_CHUNK_SIZE",
        description="Number of bytes requested from the input per read.",
    )
    default_page_length: int = Field(
        default=72,
        ge=1,
        validation_alias="SELPG_DEFAULT_PAGE_LENGTH",
        description="Lines per page when `--l` is not given.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Validate and upper-case the log level name."""
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            message = f"Unknown log level '{value}'"
            raise ValueError(message)
        return normalized

    @field_validator("spooler_command")
    @classmethod
    def _require_spooler_command(cls, value: str) -> str:
        """Reject blank spooler commands."""
        stripped = value.strip()
        if not stripped:
            message = "spooler command must not be empty"
            raise ValueError(message)
        return stripped


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance.

    Raises:
        SettingsError: If settings cannot be loaded or validated.

    Returns:
        Settings: The loaded settings instance.
    """
    try:
        return Settings()
    except Exception as exc:
        raise SettingsError(exc=exc) from exc
