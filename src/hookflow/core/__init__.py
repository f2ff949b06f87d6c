"""Core HookFlow utilities.

This module exports core utilities for use throughout the application.
"""

from hookflow.core.config import Settings, get_settings
from hookflow.core.logging import (
    LoggingContext,
    bind_context,
    clear_context,
    configure_default_logging,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "configure_default_logging",
    "get_logger",
    "LoggingContext",
    "bind_context",
    "clear_context",
]
