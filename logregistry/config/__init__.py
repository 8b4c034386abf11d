"""Channel configuration for logregistry.

Loads a YAML file declaring named channels, validates it into frozen
dataclasses and registers the resulting loggers in a :class:`Registry`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from logregistry.core.errors import ConfigError
from logregistry.core.logger import get_logger
from logregistry.core.settings import config_path as _default_config_path
from logregistry.registry import Registry


_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")
_CHANNEL_KEYS = {"logger", "level", "propagate", "overwrite"}


@dataclass(frozen=True)
class ChannelConfig:
    """A single channel declaration.

    Attributes:
        channel: Name the logger is registered under.
        logger_name: Name passed to ``logging.getLogger``.
        level: Numeric level to apply, or None to leave the logger untouched.
        propagate: Propagation flag to apply, or None to leave it untouched.
        overwrite: Forwarded to ``Registry.add_logger``.
    """

    channel: str
    logger_name: str
    level: int | None = None
    propagate: bool | None = None
    overwrite: bool = False


@dataclass(frozen=True)
class RegistryConfig:
    """Validated channel declarations in file order."""

    channels: tuple[ChannelConfig, ...]
    source: Path | None = None

    def channel(self, name: str) -> ChannelConfig:
        """Return a channel declaration by name."""

        for item in self.channels:
            if item.channel == name:
                return item
        raise ConfigError(f"channel {name} is not declared")


def load_registry_config(path: str | Path | None = None) -> RegistryConfig:
    """Load channel declarations from YAML.

    Args:
        path: Config file; falls back to the ``LOGREGISTRY_CONFIG`` setting.

    Returns:
        Parsed ``RegistryConfig``.

    Raises:
        ConfigError: If the file is missing or fails validation.
    """

    if path is None:
        path = _default_config_path()
    if path is None:
        raise ConfigError("no config path given and LOGREGISTRY_CONFIG is not set")
    cfg_path = Path(path)
    data = _load_yaml(cfg_path)
    return parse_registry_config(data, source=cfg_path)


def parse_registry_config(data: Mapping[str, Any], *, source: Path | None = None) -> RegistryConfig:
    """Validate an already-parsed mapping into a ``RegistryConfig``."""

    channels_node = data.get("channels")
    if not isinstance(channels_node, Mapping) or not channels_node:
        raise ConfigError("channels node is missing or empty")
    channels = tuple(_build_channel(key, spec) for key, spec in channels_node.items())
    return RegistryConfig(channels=channels, source=source)


def populate_registry(registry: Registry, config: RegistryConfig) -> list[str]:
    """Register every declared channel and return their names in order.

    Raises:
        DuplicateNameError: If a channel name is already registered and the
            declaration does not set ``overwrite``.
    """

    log = get_logger().getChild("config")
    registered: list[str] = []
    for item in config.channels:
        logger = logging.getLogger(item.logger_name)
        if item.level is not None:
            logger.setLevel(item.level)
        if item.propagate is not None:
            logger.propagate = item.propagate
        registry.add_logger(logger, item.channel, overwrite=item.overwrite)
        log.info("registry.populate channel=%s logger=%s", item.channel, item.logger_name)
        registered.append(item.channel)
    return registered


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")
    return data


def _build_channel(key: Any, spec: Any) -> ChannelConfig:
    if not isinstance(key, str) or not key.strip():
        raise ConfigError(f"channel name must be a non-empty string: {key!r}")
    if spec is None:
        spec = {}
    if not isinstance(spec, Mapping):
        raise ConfigError(f"channel {key} must be a mapping")
    unknown = set(spec) - _CHANNEL_KEYS
    if unknown:
        raise ConfigError(f"channel {key} has unknown fields: {', '.join(sorted(map(str, unknown)))}")

    logger_name = spec.get("logger", key)
    if not isinstance(logger_name, str) or not logger_name:
        raise ConfigError(f"channel {key} logger must be a non-empty string")

    propagate = spec.get("propagate")
    if propagate is not None and not isinstance(propagate, bool):
        raise ConfigError(f"channel {key} propagate must be a boolean")
    overwrite = spec.get("overwrite", False)
    if not isinstance(overwrite, bool):
        raise ConfigError(f"channel {key} overwrite must be a boolean")

    return ChannelConfig(
        channel=key,
        logger_name=logger_name,
        level=_parse_level(key, spec.get("level")),
        propagate=propagate,
        overwrite=overwrite,
    )


def _parse_level(key: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigError(f"channel {key} level must be a level name or integer")
    if isinstance(value, int):
        if value < 0:
            raise ConfigError(f"channel {key} level must not be negative")
        return value
    if isinstance(value, str) and value.strip().upper() in _LEVEL_NAMES:
        return logging.getLevelName(value.strip().upper())
    raise ConfigError(f"channel {key} has unknown level: {value!r}")


__all__ = [
    "ChannelConfig",
    "RegistryConfig",
    "load_registry_config",
    "parse_registry_config",
    "populate_registry",
]
