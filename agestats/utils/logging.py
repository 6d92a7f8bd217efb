"""Logging helpers for the Streamlit age statistics app.

The form logs submit outcomes and resets at INFO and per-field rejections at
DEBUG; the root level comes from ``AGESTATS_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO


_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: int | str = logging.INFO, *, stream: Optional[TextIO] = None) -> None:
    """Configure application logging.

    Streamlit re-executes the entry script on every interaction, so this
    replaces the root handlers instead of stacking new ones.

    Parameters
    ----------
    level:
        Logging level for the root logger, either numeric or a level name
        such as ``"DEBUG"``.
    stream:
        Optional stream to write to instead of the default ``sys.stderr``.
    """

    if isinstance(level, str):
        level = level.upper()

    logging.captureWarnings(True)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger."""

    return logging.getLogger(name)
