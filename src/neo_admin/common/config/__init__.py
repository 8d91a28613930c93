"""Configuration module."""

from .settings import Settings, get_settings
from .logging_config import LoggingConfig

__all__ = [
    "Settings",
    "get_settings",
    "LoggingConfig",
]
