"""Configuration models for Lumenr."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log records")
    filename: str | None = Field(default=None, description="Log file path (stdout when None)")


class ParsingConfig(BaseModel):
    """Description parsing configuration."""

    language: Literal["ru", "en"] = Field(
        default="ru", description="Grammar used to read item descriptions"
    )

    model_config = ConfigDict(
        extra="forbid",  # Reject unknown fields
        frozen=True,
    )


class AppConfig(BaseModel):
    """Application-level configuration.

    Unknown top-level keys are ignored so one config file can be shared
    with other tools.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path."""
        return Path("config.json")


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "ParsingConfig",
]
