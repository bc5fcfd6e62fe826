"""Logging setup for fuzz_merge."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "fuzz_merge"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: int = logging.INFO, handler: Optional[logging.Handler] = None) -> logging.Logger:
    """Attach a single handler to the package logger.

    Calling it again only updates the level.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if _configured:
        return logger

    logger.handlers.clear()
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    logger.addHandler(handler)
    # keep propagating so pytest's caplog sees records
    logger.propagate = True

    _configured = True
    return logger


def reset_logging() -> None:
    global _configured
    _configured = False
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
