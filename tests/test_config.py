"""
Tests for webselect configuration system.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

import pytest

from webselect.config import (
    DEFAULT_TIMEOUT,
    DEFAULT_URL,
    ClientOptions,
    LoggingOptions,
    WebSelectConfig,
    coerce,
    env_var_name,
    find_config_file,
    load_config,
    load_env_config,
    load_file,
    merge_configs,
)
from webselect.errors import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove WEBSELECT_* variables for the duration of a test."""
    for key in list(os.environ):
        if key.startswith("WEBSELECT_"):
            monkeypatch.delenv(key)
    return monkeypatch


class TestClientOptions:
    """Tests for ClientOptions class."""

    def test_defaults(self):
        """Test default client options."""
        options = ClientOptions()
        assert options.url == DEFAULT_URL
        assert options.timeout == DEFAULT_TIMEOUT
        assert options.verify_ssl is True
        assert options.capabilities == {"browserName": "chrome"}

    def test_url_normalized(self):
        """Test trailing slashes and whitespace are stripped."""
        options = ClientOptions(url=" http://selenium:4444/wd/hub/ ")
        assert options.url == "http://selenium:4444/wd/hub"

    def test_url_must_be_http(self):
        """Test non-HTTP URLs are rejected."""
        with pytest.raises(ValueError):
            ClientOptions(url="ftp://selenium")

    def test_timeout_positive(self):
        with pytest.raises(ValueError):
            ClientOptions(timeout=0)

    def test_sync_timeout_may_be_disabled(self):
        assert ClientOptions(sync_timeout=None).sync_timeout is None

    def test_capabilities_not_shared(self):
        """Test default capabilities are copied per instance."""
        first = ClientOptions()
        first.capabilities["browserName"] = "firefox"
        assert ClientOptions().capabilities == {"browserName": "chrome"}


class TestLoggingOptions:
    """Tests for LoggingOptions class."""

    def test_level_normalized(self):
        assert LoggingOptions(level="debug").level == "DEBUG"

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            LoggingOptions(level="chatty")


class TestWebSelectConfig:
    """Tests for WebSelectConfig class."""

    def test_from_dict(self):
        """Test creating config from dictionary."""
        config = WebSelectConfig.from_dict(
            {
                "client": {"url": "http://grid:4444", "timeout": 5},
                "logging": {"level": "info"},
            }
        )
        assert config.client.url == "http://grid:4444"
        assert config.client.timeout == 5.0
        assert config.logging.level == "INFO"

    def test_to_dict(self):
        """Test converting config to dictionary."""
        data = WebSelectConfig().to_dict()
        assert data["client"]["url"] == DEFAULT_URL
        assert data["logging"]["level"] == "WARNING"


class TestEnvironment:
    """Tests for environment variable support."""

    def test_env_var_name(self):
        """Test converting options to env var names."""
        assert env_var_name("client", "timeout") == "WEBSELECT_CLIENT_TIMEOUT"
        assert env_var_name("client", "verify-ssl") == "WEBSELECT_CLIENT_VERIFY_SSL"

    def test_coerce_scalars(self):
        assert coerce("no", bool) is False
        assert coerce("On", bool) is True
        assert coerce("12.5", float) == 12.5
        assert coerce("http://grid:4444", str) == "http://grid:4444"

    def test_coerce_optional(self):
        """Test optional options accept an explicit none."""
        assert coerce("none", Optional[float]) is None
        assert coerce("30", Optional[float]) == 30.0

    def test_coerce_mapping(self):
        """Test mappings parse from key=value pairs or JSON."""
        assert coerce("X-Token=abc, X-Team = qa", dict[str, str]) == {
            "X-Token": "abc",
            "X-Team": "qa",
        }
        assert coerce('{"browserName": "firefox"}', dict[str, Any]) == {
            "browserName": "firefox"
        }

    def test_invalid_value(self, clean_env):
        clean_env.setenv("WEBSELECT_CLIENT_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError, match="WEBSELECT_CLIENT_TIMEOUT"):
            load_env_config()

    def test_explicit_environ(self):
        """Test reading from a mapping instead of the process environment."""
        assert load_env_config({"WEBSELECT_CLIENT_VERIFY_SSL": "false"}) == {
            "client": {"verify_ssl": False}
        }

    def test_load_env_config(self, clean_env):
        """Test only variables that are set are loaded."""
        clean_env.setenv("WEBSELECT_CLIENT_TIMEOUT", "15")
        clean_env.setenv("WEBSELECT_LOGGING_LEVEL", "debug")

        assert load_env_config() == {
            "client": {"timeout": 15.0},
            "logging": {"level": "debug"},
        }


class TestConfigFiles:
    """Tests for configuration file loading."""

    def test_load_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text(json.dumps({"client": {"timeout": 20}}))

            assert load_file(path) == {"client": {"timeout": 20}}

    def test_load_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            path.write_text("client:\n  url: http://grid:4444\n")

            assert load_file(path) == {"client": {"url": "http://grid:4444"}}

    def test_load_toml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text('[logging]\nlevel = "INFO"\n')

            assert load_file(path) == {"logging": {"level": "INFO"}}

    def test_empty_yaml(self):
        """Test an empty YAML file is an empty mapping."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yml"
            path.write_text("")

            assert load_file(path) == {}

    def test_missing_file(self):
        with pytest.raises(ConfigurationError, match="not found"):
            load_file("/nonexistent/webselect.config.json")

    def test_unsupported_format(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.ini"
            path.write_text("[client]\n")

            with pytest.raises(ConfigurationError, match="Unsupported"):
                load_file(path)

    def test_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text("{not json")

            with pytest.raises(ConfigurationError, match="Failed to parse"):
                load_file(path)

    def test_invalid_encoding(self):
        """Test undecodable files are reported as configuration errors."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_bytes(b"\xff\xfe")

            with pytest.raises(ConfigurationError, match="Failed to read"):
                load_config(path, load_env=False)

    def test_directory_instead_of_file(self):
        """Test a directory with a config name is reported as a configuration error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "conf.yaml"
            path.mkdir()

            with pytest.raises(ConfigurationError, match="Failed to read"):
                load_config(path, load_env=False)

    def test_root_must_be_mapping(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            path.write_text("- one\n- two\n")

            with pytest.raises(ConfigurationError, match="mapping"):
                load_file(path)

    def test_find_config_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "webselect.config.yaml"
            path.write_text("{}")

            assert find_config_file(search_paths=[tmpdir]) == path
            assert find_config_file("other", search_paths=[tmpdir]) is None


class TestLoadConfig:
    """Tests for load_config()."""

    def test_merge_configs(self):
        """Test later configs override earlier ones key by key."""
        merged = merge_configs(
            {"client": {"url": "http://a:4444", "timeout": 1}},
            {"client": {"timeout": 2}},
        )
        assert merged == {"client": {"url": "http://a:4444", "timeout": 2}}

    def test_defaults(self, clean_env):
        config = load_config(load_env=False)
        assert config.client.url == DEFAULT_URL

    def test_priority(self, clean_env):
        """Test overrides beat environment which beats the file."""
        clean_env.setenv("WEBSELECT_CLIENT_TIMEOUT", "15")
        clean_env.setenv("WEBSELECT_CLIENT_URL", "http://env:4444")

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text(
                json.dumps(
                    {
                        "client": {"url": "http://file:4444", "timeout": 5, "verify_ssl": False},
                    }
                )
            )

            config = load_config(path, overrides={"client": {"url": "http://override:4444"}})

        assert config.client.url == "http://override:4444"
        assert config.client.timeout == 15.0
        assert config.client.verify_ssl is False

    def test_invalid_configuration(self, clean_env):
        """Test validation failures become ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(overrides={"client": {"timeout": -1}}, load_env=False)
