"""Logging setup for the supervisor agent.

Modules log through ``get_logger(__name__)``; everything under the
``supervisor_agent`` namespace shares the single stderr handler installed by
``setup_logging``.
"""

import logging
import os
import sys

LOGGER_NAME = "supervisor_agent"
LOG_LEVEL_ENV = "SUPERVISOR_AGENT_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | None = None) -> int:
    """Map a level name to a numeric logging level.

    The explicit name wins over the SUPERVISOR_AGENT_LOG_LEVEL env var. An
    unknown name falls back to WARNING with a note on stderr.
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "").strip().upper()
    if not name:
        return DEFAULT_LEVEL

    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        print(f"Warning: Invalid log level '{name}', using WARNING", file=sys.stderr)
        return DEFAULT_LEVEL
    return numeric


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the package logger; safe to call more than once.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR), usually from --log-level.

    Returns:
        The ``supervisor_agent`` logger.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
