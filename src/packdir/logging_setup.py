"""Logging configuration for the packdir console."""

from __future__ import annotations

import logging
import sys

from .constants import APP_NAME, LOG_FORMAT


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Route packdir log records to stderr. Safe to call more than once."""
    app_logger = logging.getLogger(APP_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(handler)
    app_logger.setLevel(level)
    return app_logger
