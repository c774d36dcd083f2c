"""
Configuration loading for webselect.

Sources are layered from lowest to highest priority: built-in defaults, a
configuration file (JSON, YAML or TOML), ``WEBSELECT_*`` environment
variables, then explicit overrides.
"""

import json
import tomllib
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Union

import yaml
from pydantic import ValidationError

from webselect.errors import ConfigurationError

from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import WebSelectConfig

PathLike = Union[str, Path]

_PARSERS: dict[str, Callable[[str], Any]] = {
    ".json": json.loads,
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".toml": tomllib.loads,
}


def load_file(path: PathLike) -> dict[str, Any]:
    """Read one configuration file, picking the parser by extension.

    Raises:
        ConfigurationError: If the file is missing, has an unknown
            extension, does not parse or is not a mapping.
    """
    path = Path(path)
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ConfigurationError(f"Unsupported configuration format: {path.suffix}")

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read {path}: {e}") from e

    try:
        data = parser(text)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {path}")
    return data


def find_config_file(
    filename: str = DEFAULT_CONFIG_FILENAME,
    search_paths: Optional[Iterable[PathLike]] = None,
    extensions: Optional[Iterable[str]] = None,
) -> Optional[Path]:
    """Return the first existing ``<dir>/<filename><ext>``, or None."""
    directories = list(search_paths or DEFAULT_CONFIG_SEARCH_PATHS)
    suffixes = list(extensions or DEFAULT_CONFIG_EXTENSIONS)

    candidates = (
        Path(directory).expanduser() / f"{filename}{suffix}"
        for directory in directories
        for suffix in suffixes
    )
    return next((path for path in candidates if path.is_file()), None)


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge mappings into a new dictionary, later ones win key by key."""
    merged: dict[str, Any] = {}
    for config in configs:
        for key, value in config.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = merge_configs(current, value)
            else:
                merged[key] = value
    return merged


def load_config(
    config_file: Optional[PathLike] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    auto_find: bool = False,
) -> WebSelectConfig:
    """Build the effective configuration.

    Args:
        config_file: Configuration file to read.
        overrides: Values that win over every other source.
        load_env: Apply ``WEBSELECT_*`` environment variables.
        auto_find: Look for ``webselect.config.*`` in the default
            locations when no file is given.

    Raises:
        ConfigurationError: If a source cannot be read or the merged
            result does not validate.
    """
    if config_file is None and auto_find:
        config_file = find_config_file()

    layers = [
        load_file(config_file) if config_file is not None else {},
        load_env_config() if load_env else {},
        overrides or {},
    ]

    try:
        return WebSelectConfig.from_dict(merge_configs(*layers))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


__all__ = [
    "find_config_file",
    "load_config",
    "load_file",
    "merge_configs",
]
