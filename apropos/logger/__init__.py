"""
Apropos Logger Package
"""

from .configure import (
    LogFormat,
    LoggingSettings,
    active_settings,
    configure_logging,
    get_logger,
    setup_default_logging,
)

__all__ = [
    "LogFormat",
    "LoggingSettings",
    "active_settings",
    "configure_logging",
    "get_logger",
    "setup_default_logging",
]
