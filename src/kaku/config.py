"""
Configuration
=============
Global constants for canvas limits, history and project files, plus the
environment lookup for the default log level.

Exports:
    DEFAULT_WIDTH, DEFAULT_HEIGHT (int): Size of a new canvas.
    MIN_DIMENSION, MAX_DIMENSION (int): Clamp range for canvas dimensions.
    HISTORY_CAPACITY (int): Maximum number of undoable actions.
"""
import logging
import os

# Canvas
DEFAULT_WIDTH: int = 32
DEFAULT_HEIGHT: int = 32
MIN_DIMENSION: int = 8
MAX_DIMENSION: int = 128

# Editing
HISTORY_CAPACITY: int = 256
RECENT_COLOR_LIMIT: int = 8

# Project files
PROJECT_EXTENSION: str = ".kaku"
PROJECT_VERSION: int = 3

LOG_LEVEL_ENV: str = "KAKU_LOG_LEVEL"


def default_log_level() -> int:
    """Log level from ``KAKU_LOG_LEVEL`` (name or number), WARNING if unset."""
    value = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not value:
        return logging.WARNING
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING
