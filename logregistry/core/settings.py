from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv


LOG_DIR_ENV = "LOGREGISTRY_LOG_DIR"
CONFIG_ENV = "LOGREGISTRY_CONFIG"
LOG_LEVEL_ENV = "LOGREGISTRY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_BASE = Path.home() / ".logregistry" / "logs"


load_dotenv(override=False)


def log_dir() -> Path:
    """Directory for the package log file (``LOGREGISTRY_LOG_DIR`` or ~/.logregistry/logs)."""
    env = os.getenv(LOG_DIR_ENV)
    if env:
        return Path(env).expanduser()
    return DEFAULT_LOG_BASE


def config_path() -> Path | None:
    env = os.getenv(CONFIG_ENV)
    if not env:
        return None
    return Path(env).expanduser()


def log_level() -> int:
    """Level for the package logger from ``LOGREGISTRY_LOG_LEVEL`` (name or number).

    Unknown values fall back to INFO.
    """
    env = (os.getenv(LOG_LEVEL_ENV) or "").strip()
    if not env:
        return DEFAULT_LOG_LEVEL
    if env.isdigit():
        return int(env)
    level = logging.getLevelName(env.upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL
