"""Package diagnostics logger.

The ``logregistry`` logger is configured once per process with a rotating
file under the settings log directory and a stdout stream. Modules take
children of it via ``get_logger().getChild(...)``.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

from . import settings

LOGGER_NAME = "logregistry"
LOG_FILE_NAME = "logregistry.log"
MAX_LOG_BYTES = 2 * 1024 * 1024
BACKUP_COUNT = 3

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGER: logging.Logger | None = None


def _build_handlers(log_path: Path, level: int) -> list[logging.Handler]:
    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)
    file_handler = RotatingFileHandler(
        log_path, maxBytes=MAX_LOG_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
    )
    console = logging.StreamHandler(sys.stdout)
    handlers: list[logging.Handler] = [file_handler, console]
    for handler in handlers:
        handler.setFormatter(fmt)
        handler.setLevel(level)
    return handlers


def get_logger(log_dir: Path | None = None, level: int | None = None) -> logging.Logger:
    """Return the package logger, configuring it on first use.

    Args:
        log_dir: Directory for ``logregistry.log``; defaults to ``settings.log_dir()``.
        level: Logger level; defaults to ``settings.log_level()``.

    Arguments are ignored once the logger is configured; call ``reset_logger()`` first
    to apply new ones.
    """
    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER

    base = Path(log_dir) if log_dir is not None else settings.log_dir()
    base.mkdir(parents=True, exist_ok=True)
    resolved_level = settings.log_level() if level is None else level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved_level)
    logger.propagate = False
    for handler in _build_handlers(base / LOG_FILE_NAME, resolved_level):
        logger.addHandler(handler)

    _LOGGER = logger
    return logger


def reset_logger() -> None:
    """Detach and close our handlers so the next get_logger() call reconfigures."""
    global _LOGGER
    if _LOGGER is None:
        return
    for handler in list(_LOGGER.handlers):
        if isinstance(handler, RotatingFileHandler) or type(handler) is logging.StreamHandler:
            _LOGGER.removeHandler(handler)
            handler.close()
    _LOGGER = None
