"""screenplay config — configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
import yaml

from screenplay.core.config import DEFAULT_CONFIG_FILENAME, load_config, save_config
from screenplay.core.exceptions import ConfigError
from screenplay.core.models import Config

config_app = typer.Typer(
    name="config",
    help="Configuration management commands.",
    no_args_is_help=True,
)


@config_app.command(name="show")
def config_show(
    config_path: str | None = typer.Option(None, "--config", "-c", help="Config file path."),
    show_secrets: bool = typer.Option(
        False, "--show-secrets", help="Print passwords instead of masking them."
    ),
) -> None:
    """Show the effective configuration (defaults + YAML + env)."""
    try:
        path = Path(config_path) if config_path else None
        config = load_config(config_path=path)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from None

    data = config.model_dump(mode="json")
    if not show_secrets:
        for credentials in data["credentials"].values():
            credentials["password"] = "*****"
    typer.echo(yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False))


@config_app.command(name="init")
def config_init(
    base_url: str = typer.Option("http://localhost:3003", "--base-url", "-u", help="App URL."),
    config_path: str | None = typer.Option(None, "--config", "-c", help="Config file path."),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file."),
) -> None:
    """Write a config file with default timeouts and credentials."""
    path = Path(config_path) if config_path else Path.cwd() / DEFAULT_CONFIG_FILENAME
    if path.exists() and not force:
        typer.echo(f"Error: {path} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(code=1)
    save_config(Config(base_url=base_url), path)
    typer.echo(f"Config written to {path}")


@config_app.command(name="set")
def config_set(
    key: str = typer.Argument(help="Dotted config key (e.g. timeouts.element_s)."),
    value: str = typer.Argument(help="Value to set."),
    config_path: str | None = typer.Option(None, "--config", "-c", help="Config file path."),
) -> None:
    """Set a configuration value by dotted key."""
    try:
        path = Path(config_path) if config_path else _find_config_path()
        overrides = _dotted_key_to_dict(key, value)
        config = load_config(config_path=path, overrides=overrides)
        save_config(config, path)
        typer.echo(f"Set {key} = {value}")
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from None


def _find_config_path() -> Path:
    """Find the config file path, defaulting to screenplay.config.yaml in cwd."""
    cwd = Path.cwd()
    candidate = cwd / DEFAULT_CONFIG_FILENAME
    if candidate.exists():
        return candidate
    candidate = cwd / ".screenplay" / DEFAULT_CONFIG_FILENAME
    if candidate.exists():
        return candidate
    return cwd / DEFAULT_CONFIG_FILENAME


def _dotted_key_to_dict(key: str, value: str) -> dict[str, Any]:
    """Convert 'timeouts.element_s' to {'timeouts': {'element_s': value}}."""
    parts = key.split(".")
    result: dict[str, Any] = {}
    current = result
    for part in parts[:-1]:
        current[part] = {}
        current = current[part]
    current[parts[-1]] = value
    return result
