"""
Runtime configuration.

Settings come from ZENTRADE_* environment variables; fixed values live in
zentrade.core.constants.
"""

import os
import sys
from collections.abc import Mapping

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from zentrade.core.constants import DEFAULT_COACHING_MODEL, DEFAULT_JOURNAL_PATH
from zentrade.core.exceptions.journal import ConfigurationError

ENV_PREFIX = "ZENTRADE_"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class JournalSettings(BaseModel):
    """Application settings."""

    journal_path: str = Field(default=DEFAULT_JOURNAL_PATH, min_length=1)
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )
    coaching_model: str = Field(default=DEFAULT_COACHING_MODEL, min_length=1)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one loguru knows."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: object) -> object:
        """Accept a comma-separated string of origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "JournalSettings":
        """Build settings from ZENTRADE_* environment variables.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        values = {
            name: environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in environ
        }
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def setup_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure logging with loguru."""
    logger.remove()

    level = "DEBUG" if debug else (level or "INFO")
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)
