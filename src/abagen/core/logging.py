"""Logger helpers for the ``abagen`` package.

Library modules only call ``get_logger``; output stays silent until an
embedding application calls ``configure_logging``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from abagen.core.config import AbaSettings

_PKG_LOGGER_NAME = "abagen"


def configure_logging(level: int | str | None = None, *, stream: IO[str] = sys.stderr) -> None:
    """Send package logs to ``stream`` at ``level`` (default ``ABA_LOG_LEVEL``)."""
    if level is None:
        level = AbaSettings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    logger.handlers = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
