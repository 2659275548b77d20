"""Environment configuration and validation.

Settings are loaded from environment variables (optionally via a local `.env` file). Every value
has a default, so the bundled calendar works without any configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATASET_PATH = Path(__file__).resolve().parents[1] / "data" / "svatky.txt"

_LOG_LEVELS = frozenset(logging.getLevelNamesMapping())


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    dataset_path: Path = Field(default=DEFAULT_DATASET_PATH, alias="NAMEDAYS_DATASET_PATH")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the level name and reject names the logging module does not know."""

        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}")
        return level


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
