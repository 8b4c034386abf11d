"""`logregistry` keeps shared loggers reachable by name."""

# Module responsibilities:
# - Re-export the registry, its default-instance helpers and error types as the stable API surface.

from __future__ import annotations

from .core.errors import (
    ConfigError,
    DuplicateNameError,
    InvalidValueError,
    NotFoundError,
    RegistryError,
)
from .registry import LoggerLike, Registry, default_registry, is_logger, reset_default_registry

__all__ = [
    "Registry",
    "LoggerLike",
    "default_registry",
    "reset_default_registry",
    "is_logger",
    "RegistryError",
    "DuplicateNameError",
    "NotFoundError",
    "InvalidValueError",
    "ConfigError",
]

__version__ = "0.1.0"
