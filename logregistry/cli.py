"""Typer based command line entry points for logregistry."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from logregistry.config import load_registry_config, populate_registry
from logregistry.core.errors import RegistryError
from logregistry.core.logger import get_logger
from logregistry.registry import Registry

app = typer.Typer(name="logregistry", help="Inspect logger channel configurations.")


def _handle_error(exc: Exception) -> None:
    get_logger().error("logregistry command failed: %s", exc, exc_info=True)
    typer.secho(f"Error: {exc}", fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _build_registry(config: Optional[Path]) -> Registry:
    registry = Registry()
    populate_registry(registry, load_registry_config(config))
    return registry


@app.command("channels")
def cmd_channels(
    config: Optional[Path] = typer.Option(None, "--config", help="Channel config YAML (defaults to LOGREGISTRY_CONFIG)"),
) -> None:
    """List configured channels with their logger name and effective level."""

    try:
        registry = _build_registry(config)
    except RegistryError as exc:
        _handle_error(exc)
    else:
        for name, logger in registry.items():
            level = logging.getLevelName(logger.getEffectiveLevel())
            typer.echo(f"{name:20} {logger.name:30} {level}")


@app.command("validate")
def cmd_validate(
    config: Optional[Path] = typer.Option(None, "--config", help="Channel config YAML (defaults to LOGREGISTRY_CONFIG)"),
) -> None:
    """Load the config into a fresh registry and report the channel count."""

    try:
        registry = _build_registry(config)
    except RegistryError as exc:
        _handle_error(exc)
    else:
        typer.echo(f"ok ({len(registry)} channels)")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
