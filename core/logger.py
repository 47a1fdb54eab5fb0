"""Logging helpers for the application.

Provides a convenience `get_logger` factory that configures a stream and
rotating file handler for consistent logging across modules. Loggers start
at INFO; `configure_logging` applies MACROMIND_LOG_LEVEL once the entry
point is ready to report a bad value.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Set

from core import config

if not os.path.exists(config.LOG_DIR):
    os.makedirs(config.LOG_DIR, exist_ok=True)

LOG_FILE = os.path.join(config.LOG_DIR, "macromind.log")

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)

_file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
_file_handler.setFormatter(_formatter)

_level = logging.INFO
_managed: Set[str] = set()


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a configured logger with stream and rotating file handlers.

    Avoids adding duplicate handlers when called multiple times. Loggers
    created without an explicit `level` follow `configure_logging`.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level if level is not None else _level)
        logger.addHandler(_stream_handler)
        logger.addHandler(_file_handler)
        if level is None:
            _managed.add(name)
    return logger


def configure_logging(level_name: Optional[str] = None) -> int:
    """Apply a level name (default: MACROMIND_LOG_LEVEL) to managed loggers.

    Raises:
        ConfigurationError: If the name is not a standard logging level.
    """
    global _level
    _level = config.resolve_log_level(level_name if level_name is not None else config.LOG_LEVEL)
    for name in _managed:
        logging.getLogger(name).setLevel(_level)
    return _level
