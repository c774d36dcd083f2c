"""
Default configuration values for webselect.

This module contains all default values used throughout the configuration system.
"""

from typing import Any

# Client defaults
DEFAULT_URL = "http://localhost:4444/wd/hub"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_VERIFY_SSL = True
DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json;charset=UTF-8",
}
DEFAULT_CAPABILITIES: dict[str, Any] = {"browserName": "chrome"}

# Blocking facade
DEFAULT_SYNC_TIMEOUT = 60.0

# Logging defaults
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Environment variables
ENV_PREFIX = "WEBSELECT_"

# Config file discovery
DEFAULT_CONFIG_FILENAME = "webselect.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [".", "~/.config/webselect", "~"]

