"""
Configuration loading utilities.

Supports environment variable interpolation and inheritance from a
``base.yaml`` placed next to the main configuration file.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from gtfs_ingest.config.settings import IngestionConfig


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping at the top level: {path}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> IngestionConfig:
    """
    Load ingestion configuration from YAML file(s).

    An empty file yields the defaults. Dependency lists may be written as
    YAML sequences; they are normalized to tuples.

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional base configuration; defaults to ``base.yaml``
            in the same directory when that file exists.

    Returns:
        Validated IngestionConfig.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ValueError: If the content is not a valid configuration.
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        if potential_base.exists() and potential_base != config_path:
            base_data = load_yaml(potential_base)
        else:
            base_data = {}

    merged = _deep_merge(base_data, load_yaml(config_path))

    dependencies = merged.get("dependencies")
    if dependencies is not None:
        if not isinstance(dependencies, dict):
            msg = "'dependencies' must map table names to lists of table names"
            raise ValueError(msg)
        merged["dependencies"] = {
            str(table): tuple(str(dep) for dep in (deps or ()))
            for table, deps in dependencies.items()
        }

    mandatory = merged.get("mandatory_tables")
    if mandatory is not None:
        merged["mandatory_tables"] = tuple(str(name) for name in mandatory)

    return IngestionConfig.model_validate(merged)
