"""
Configuration module for webselect.

- Strongly-typed option classes (ClientOptions, LoggingOptions)
- Configuration file loading (JSON, YAML, TOML)
- Environment variable support
- Validation and type checking via Pydantic

Example usage:
    from webselect.config import ClientOptions, load_config

    # Load from file with environment overrides
    config = load_config("webselect.config.yaml")

    # Create programmatically
    options = ClientOptions(url="http://selenium:4444/wd/hub", timeout=60)

Environment variables:
    WEBSELECT_CLIENT_URL=http://selenium:4444/wd/hub
    WEBSELECT_CLIENT_TIMEOUT=60
    WEBSELECT_LOGGING_LEVEL=DEBUG
"""

from .defaults import (
    DEFAULT_CAPABILITIES,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_HEADERS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SYNC_TIMEOUT,
    DEFAULT_TIMEOUT,
    DEFAULT_URL,
    ENV_PREFIX,
)
from .env import coerce, env_var_name, load_env_config
from .loader import find_config_file, load_config, load_file, merge_configs
from .options import ClientOptions, LoggingOptions, WebSelectConfig

__all__ = [
    # Defaults
    "DEFAULT_CAPABILITIES",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_HEADERS",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SYNC_TIMEOUT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_URL",
    "ENV_PREFIX",
    # Environment
    "coerce",
    "env_var_name",
    "load_env_config",
    # Loader
    "find_config_file",
    "load_config",
    "load_file",
    "merge_configs",
    # Options
    "ClientOptions",
    "LoggingOptions",
    "WebSelectConfig",
]
