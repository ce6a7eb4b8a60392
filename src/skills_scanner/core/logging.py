"""Logging setup for the skills-scanner launcher.

All module loggers live under the ``skills_scanner`` hierarchy and write to
stderr, so nothing the launcher logs mixes with the scanner's stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional, TextIO

ROOT_LOGGER_NAME = "skills_scanner"

# Environment variable that overrides the configured log level
LOG_LEVEL_ENV = "SKILLS_SCANNER_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "warning"

# Error is the most restrictive level so launch diagnostics are never hidden
LOG_LEVELS: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class _LauncherFormatter(logging.Formatter):
    """Prefix messages with the command name, and the level unless it is an error."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.ERROR:
            return f"skills-scanner: {message}"
        return f"skills-scanner: {record.levelname}: {message}"


def get_logger(name: str) -> logging.Logger:
    """Get a logger nested under the skills_scanner hierarchy.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def resolve_log_level(configured: Optional[str] = None) -> str:
    """Pick the effective level name.

    Resolution order:
    1. SKILLS_SCANNER_LOG_LEVEL environment variable (if set and valid)
    2. The configured level (if valid)
    3. ``warning``
    """
    env_level = os.environ.get(LOG_LEVEL_ENV, "").strip().lower()
    if env_level in LOG_LEVELS:
        return env_level
    if configured and configured.lower() in LOG_LEVELS:
        return configured.lower()
    return DEFAULT_LOG_LEVEL


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Install a single stderr handler on the launcher's root logger.

    Calling this again replaces the previous handler.

    Args:
        level: Configured level name; see :func:`resolve_log_level`.
        stream: Output stream (default: the current ``sys.stderr``).
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(_LauncherFormatter())
    logger.addHandler(handler)
    logger.setLevel(LOG_LEVELS[resolve_log_level(level)])
    logger.propagate = False
