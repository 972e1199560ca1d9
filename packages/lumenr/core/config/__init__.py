"""Configuration management for Lumenr."""

from lumenr.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from lumenr.core.config.models import AppConfig, LoggingConfig, ParsingConfig

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "LoggingConfig",
    "ParsingConfig",
]
