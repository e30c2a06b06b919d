"""Logging configuration for Resizer Core."""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ROOT_LOGGER = "resizer_core"


def setup_logging(
    level: LogLevel = "INFO",
    format_string: str | None = None,
    stream: bool = True,
) -> logging.Logger:
    """
    Set up logging for Resizer Core.

    Args:
        level: Logging level.
        format_string: Custom format string. Uses default if None.
        stream: If True, log to stderr.

    Returns:
        The configured package logger.
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))

    # Re-running setup must not stack handlers
    logger.handlers.clear()

    if stream:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the resizer_core prefix.

    Args:
        name: Logger name suffix.

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
