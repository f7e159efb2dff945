"""Logging configuration for the application."""

from __future__ import annotations

import logging
import os

from pomodoro.core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV


def resolve_log_level(value: str | None) -> int:
    """Maps a level name like `debug` to a logging constant, falling back to the default."""
    name = (value or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def configure_logging() -> None:
    logging.basicConfig(
        level=resolve_log_level(os.environ.get(LOG_LEVEL_ENV)),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
