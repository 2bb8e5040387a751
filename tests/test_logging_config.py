"""Tests for logging setup."""

import io
import logging

from bearchat.logging_config import setup_logging


def test_setup_logging_is_idempotent_and_writes_to_stream():
    logger = logging.getLogger("bearchat")
    saved_handlers, saved_level, saved_propagate = logger.handlers[:], logger.level, logger.propagate
    logger.handlers.clear()
    stream = io.StringIO()
    try:
        setup_logging("DEBUG", stream=stream)
        setup_logging("DEBUG", stream=stream)
        logging.getLogger("bearchat.services.caching").warning("cache write failed")

        assert len(logger.handlers) == 1
        assert "bearchat.services.caching - WARNING - cache write failed" in stream.getvalue()
    finally:
        logger.handlers[:] = saved_handlers
        logger.setLevel(saved_level)
        logger.propagate = saved_propagate
