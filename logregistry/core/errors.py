"""Custom exceptions used across logregistry."""

from __future__ import annotations


class RegistryError(Exception):
    """Base error for the package."""


class DuplicateNameError(RegistryError, ValueError):
    """Raised when a logger name is already taken and overwrite is off."""

    def __init__(self, name: object) -> None:
        super().__init__("Logger with the given name already exists")
        self.name = name


class NotFoundError(RegistryError, LookupError):
    """Raised when a named logger is not in the registry."""

    def __init__(self, name: object) -> None:
        super().__init__(f'Requested "{name}" logger instance is not in the registry')
        self.name = name


class InvalidValueError(RegistryError, TypeError):
    """Raised when something other than a logger is stored."""

    def __init__(self, value: object) -> None:
        super().__init__("The registry only holds loggers")
        self.value = value


class ConfigError(RegistryError):
    """Configuration related error."""
