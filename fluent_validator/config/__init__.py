"""Configuration module for fluent-validator.

Usage:
    from fluent_validator.config import get_settings

    settings = get_settings()
    debug_all = settings.logging.debug_all
"""

from fluent_validator.config.settings import (
    CliSettings,
    LoggingSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "CliSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
