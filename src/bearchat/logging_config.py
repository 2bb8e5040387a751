"""Centralized logging configuration."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str = "INFO", stream: Optional[object] = None) -> logging.Logger:
    """
    Configure the ``bearchat`` logger hierarchy.

    Args:
        level: Log level name applied to the package logger.
        stream: Output stream for the console handler (default: stderr).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("bearchat")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid duplicate handlers when called twice (tests, app restarts)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
