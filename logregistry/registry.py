"""
RESPONSIBILITIES
- Keep a name -> logger store so code can fetch shared loggers by name.
- Offer named operations (add/has/remove/get/clear) and keyed container access
  (registry[key]) over the same backing dict.
- Provide an optional process-wide default instance with explicit teardown.
PROCESS OVERVIEW
1. add_logger() registers a logger under an explicit name or its own ``name``.
2. has_logger()/remove_logger() accept a name or a logger; loggers are matched by identity.
3. get_instance() raises NotFoundError, while registry[key] returns None on a miss.
4. registry[None] = logger (or append()) stores the logger under the next integer slot.
5. clear() empties the store and resets the slot counter.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Hashable, Iterator, Union

from logregistry.core.errors import DuplicateNameError, InvalidValueError, NotFoundError

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]

_LOGGER_TYPES = (logging.Logger, logging.LoggerAdapter)


def is_logger(value: object) -> bool:
    """Return True when ``value`` can be stored in a registry."""

    return isinstance(value, _LOGGER_TYPES)


class Registry:
    """Name -> logger store.

    Example::

        registry = Registry()
        registry.add_logger(logging.getLogger("api"))
        registry["audit"] = logging.getLogger("app.audit")

        registry.api().error("sent to the 'api' logger")
        registry["audit"].warning("sent to the 'audit' logger")

    Every read and write holds the instance lock, so a registry may be shared
    between threads.
    """

    def __init__(self) -> None:
        self._loggers: dict[Hashable, LoggerLike] = {}
        self._next_index = 0
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Named operations
    def add_logger(
        self,
        logger: LoggerLike,
        name: Hashable | None = None,
        overwrite: bool = False,
    ) -> None:
        """Register ``logger`` under ``name``.

        Args:
            logger: Logger instance to register.
            name: Channel name; the logger's own ``name`` when None or empty.
            overwrite: Replace an existing entry with the same name.

        Raises:
            DuplicateNameError: If the name is taken and ``overwrite`` is False.
            InvalidValueError: If ``logger`` is not a logger.
        """

        if not is_logger(logger):
            raise InvalidValueError(logger)
        if name is None or name == "":
            name = logger.name
        with self._lock:
            if name in self._loggers and not overwrite:
                raise DuplicateNameError(name)
            self._store(name, logger)

    def has_logger(self, logger_or_name: LoggerLike | Hashable) -> bool:
        """Check for a channel by name, or for a logger instance by identity."""

        with self._lock:
            if is_logger(logger_or_name):
                return self._find_key(logger_or_name) is not _MISSING
            return logger_or_name in self._loggers

    def remove_logger(self, logger_or_name: LoggerLike | Hashable) -> None:
        """Remove a channel by name, or the first entry holding the given logger."""

        with self._lock:
            if is_logger(logger_or_name):
                key = self._find_key(logger_or_name)
                if key is _MISSING:
                    return
            else:
                key = logger_or_name
            self._loggers.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._loggers = {}
            self._next_index = 0

    def get_instance(self, name: Hashable) -> LoggerLike:
        """Return the logger registered under ``name``.

        Raises:
            NotFoundError: If no logger is registered under ``name``.
        """

        with self._lock:
            try:
                return self._loggers[name]
            except KeyError:
                raise NotFoundError(name) from None

    def __getattr__(self, name: str) -> Callable[..., LoggerLike]:
        # Only reached for names that are not real attributes: registry.api()
        if name.startswith("_"):
            raise AttributeError(name)

        def _lookup(*args: Any, **kwargs: Any) -> LoggerLike:
            return self.get_instance(name)

        _lookup.__name__ = name
        return _lookup

    # ------------------------------------------------------------------
    # Keyed container access
    def __setitem__(self, key: Hashable | None, value: LoggerLike) -> None:
        if not is_logger(value):
            raise InvalidValueError(value)
        if key is None:
            self.append(value)
            return
        self.add_logger(value, key, overwrite=True)

    def append(self, logger: LoggerLike) -> int:
        """Store ``logger`` under the next integer slot, skipping duplicate checks."""

        if not is_logger(logger):
            raise InvalidValueError(logger)
        with self._lock:
            index = self._next_index
            while index in self._loggers:
                index += 1
            self._store(index, logger)
            return index

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._loggers

    def __delitem__(self, key: Hashable) -> None:
        with self._lock:
            self._loggers.pop(key, None)

    def __getitem__(self, key: Hashable) -> LoggerLike | None:
        return self.get(key)

    def get(self, key: Hashable, default: LoggerLike | None = None) -> LoggerLike | None:
        """Return the logger under ``key`` or ``default``; never raises on a miss."""

        with self._lock:
            return self._loggers.get(key, default)

    # ------------------------------------------------------------------
    def names(self) -> list[Hashable]:
        with self._lock:
            return list(self._loggers)

    def keys(self) -> list[Hashable]:
        return self.names()

    def items(self) -> list[tuple[Hashable, LoggerLike]]:
        with self._lock:
            return list(self._loggers.items())

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.names())

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __enter__(self) -> "Registry":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.names()!r})"

    # ------------------------------------------------------------------
    def _store(self, key: Hashable, logger: LoggerLike) -> None:
        self._loggers[key] = logger
        slot = _as_slot(key)
        if slot is not None and slot >= self._next_index:
            self._next_index = slot + 1

    def _find_key(self, logger: LoggerLike) -> Hashable:
        for key, value in self._loggers.items():
            if value is logger:
                return key
        return _MISSING


_MISSING: Any = object()


def _as_slot(key: object) -> int | None:
    # True, 1.0 and 1 are the same dict key
    if isinstance(key, int):
        return int(key)
    if isinstance(key, float) and key.is_integer():
        return int(key)
    return None


_DEFAULT: Registry | None = None
_DEFAULT_GUARD = threading.Lock()


def default_registry() -> Registry:
    """Return the shared registry, creating it on first use."""

    global _DEFAULT
    with _DEFAULT_GUARD:
        if _DEFAULT is None:
            _DEFAULT = Registry()
        return _DEFAULT


def reset_default_registry() -> None:
    """Clear and drop the shared registry; the next default_registry() call starts empty."""

    global _DEFAULT
    with _DEFAULT_GUARD:
        if _DEFAULT is not None:
            _DEFAULT.clear()
        _DEFAULT = None


__all__ = [
    "LoggerLike",
    "Registry",
    "default_registry",
    "is_logger",
    "reset_default_registry",
]
