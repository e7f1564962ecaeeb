"""
Logging for apropos.

Every module logs through a child of the ``apropos`` logger. That logger owns
the handlers: stdout always, plus a file when settings name one. Records stop
there and never reach the application's root logger.
"""

import logging
import sys
import threading
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, field_validator

ROOT_LOGGER_NAME = "apropos"


class LogFormat(Enum):
    SIMPLE = "simple"
    DETAILED = "detailed"


_FORMATS = {
    LogFormat.SIMPLE: "%(levelname)s - %(name)s - %(message)s",
    LogFormat.DETAILED: (
        "%(asctime)s - %(name)s - %(levelname)s - "
        "%(module)s:%(funcName)s:%(lineno)d - %(message)s"
    ),
}

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class LoggingSettings(BaseModel):
    """Where apropos logs go and how verbose they are."""

    level: str = "WARNING"
    format: LogFormat = LogFormat.SIMPLE
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


_lock = threading.Lock()
_active: Optional[LoggingSettings] = None


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """Replace the handlers of the ``apropos`` logger.

    Args:
        settings: Logging settings. If None, uses the defaults.

    Returns:
        The ``apropos`` logger.
    """
    global _active
    settings = settings or LoggingSettings()
    root = logging.getLogger(ROOT_LOGGER_NAME)

    with _lock:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
        if settings.file:
            Path(settings.file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(settings.file, encoding="utf-8"))

        formatter = logging.Formatter(_FORMATS[settings.format])
        for handler in handlers:
            handler.setFormatter(formatter)
            root.addHandler(handler)

        root.setLevel(settings.level)
        root.propagate = False
        _active = settings

    return root


def setup_default_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """Shortcut for ``configure_logging`` with a level and optional file."""
    return configure_logging(LoggingSettings(level=level, file=log_file))


def active_settings() -> LoggingSettings:
    """The settings the ``apropos`` logger currently runs with."""
    if _active is None:
        configure_logging()
    return _active


def get_logger(name: str | None = None) -> logging.Logger:
    """Get the ``apropos`` logger, or its child called ``name``.

    Module names already under ``apropos`` are used as they are.
    """
    if _active is None:
        configure_logging()
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
