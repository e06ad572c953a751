"""Console logging setup for the command-line entry point."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOGGER_NAME = "org_reminder"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the package logger; stdout holds results."""

    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level)
    return logger


__all__ = ["LOG_FORMAT", "LOGGER_NAME", "setup_logging"]
