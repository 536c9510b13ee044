"""Rotating log file for the timer, kept under platformdirs user_log_dir.

Modules log through ``logging.getLogger(__name__)``; records reach the file
once :func:`get_logger` has attached the handler to the ``pomodoro_cli``
logger. The live progress line owns the terminal, so nothing is logged to
stdout or stderr.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_LOGGER = "pomodoro_cli"
LOG_FILE = "pomodoro.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_MAX_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def log_path() -> Path:
    """Location of the log file; the directory is created if missing."""
    log_dir = Path(user_log_dir(APP_LOGGER))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / LOG_FILE


def _file_handler(path: Path) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def _writes_to(logger: logging.Logger, path: Path) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def get_logger() -> logging.Logger:
    """Return the application logger, attaching the file handler on first use.

    Handlers added by someone else (a test harness, an embedding program) are
    left in place; the file handler is added next to them.
    """
    global _logger
    if _logger is not None:
        return _logger

    path = log_path()
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    if not _writes_to(logger, path):
        logger.addHandler(_file_handler(path))

    _logger = logger
    return logger
