"""Scenario configuration — load / save / merge.

Base URL, credentials per role and per-operation timeouts are external
inputs to the engine. Merge order (later wins):
    1. Model defaults
    2. YAML file values
    3. Environment variables (SCREENPLAY_ prefix, __ nested delimiter)
    4. Explicit overrides dict
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from screenplay.core.exceptions import ConfigError
from screenplay.core.models import Config, default_credentials

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "screenplay.config.yaml"
ENV_PREFIX = "SCREENPLAY_"


def load_config(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Config:
    """Load Config from YAML + env vars + overrides.

    Args:
        config_path: Explicit path to YAML config. If None, searches cwd and parents.
        overrides: Overrides to merge on top (CLI flags, test fixtures).

    Returns:
        Validated Config instance.

    Raises:
        ConfigError: If YAML parsing or validation fails.
    """
    yaml_data: dict[str, Any] = {}

    if config_path is None:
        config_path = _find_config_file()

    if config_path is not None and config_path.exists():
        logger.debug("Loading config from %s", config_path)
        yaml_data = _load_yaml(config_path)

    # Env vars are collected manually so they override YAML, then everything
    # is passed as init kwargs (highest priority in BaseSettings).
    env_data = _collect_env_vars()
    merged = _deep_merge(_defaults(), yaml_data)
    merged = _deep_merge(merged, env_data)
    if overrides:
        merged = _deep_merge(merged, overrides)

    try:
        return Config(**merged)
    except Exception as e:
        msg = f"Config validation failed: {e}"
        raise ConfigError(msg) from e


def save_config(config: Config, path: Path) -> None:
    """Save Config to a YAML file, creating parent directories."""
    data = config.model_dump(mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:  # noqa: PTH123
        yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)


def _defaults() -> dict[str, Any]:
    """Defaults that must merge key by key rather than be replaced wholesale."""
    return {
        "credentials": {
            role: credentials.model_dump() for role, credentials in default_credentials().items()
        }
    }


def _find_config_file() -> Path | None:
    """Search for config file in cwd, then parent directories."""
    current = Path.cwd()
    for directory in [current, *current.parents]:
        candidate = directory / DEFAULT_CONFIG_FILENAME
        if candidate.exists():
            return candidate
        candidate = directory / ".screenplay" / DEFAULT_CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load and parse a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:  # noqa: PTH123
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Failed to parse YAML: {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read config: {path}: {e}"
        raise ConfigError(msg) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must be a YAML mapping, got {type(data).__name__}: {path}"
        raise ConfigError(msg)
    return data


def _collect_env_vars() -> dict[str, Any]:
    """Collect SCREENPLAY_ prefixed env vars into a nested dict."""
    delimiter = "__"
    result: dict[str, Any] = {}

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        parts = key[len(ENV_PREFIX) :].lower().split(delimiter)
        current = result
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base. Override wins on conflicts."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
