"""Tests for environment-based configuration."""

import dataclasses

import pytest

from onesearch_mcp.config import DEFAULT_HOST, DEFAULT_PORT, REQUIRED_VARIABLES, load_settings
from onesearch_mcp.core.exceptions import ConfigurationError


class TestRequiredVariables:
    """Tests for APIHOST/APIKEY/APIUSER validation."""

    def test_valid(self, env):
        settings = load_settings(env)
        assert settings.api.host == "onesearch.test"
        assert settings.api.api_key == "test-key"
        assert settings.api.api_user == "test-user"
        assert settings.api.base_url == "https://onesearch.test/api/v1"

    def test_all_missing(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings({})
        assert exc_info.value.missing == list(REQUIRED_VARIABLES)
        assert "Missing required variables: APIHOST, APIKEY, APIUSER" in exc_info.value.message

    def test_blank_counts_as_missing(self, env):
        env["APIKEY"] = "   "
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(env)
        assert exc_info.value.missing == ["APIKEY"]

    def test_values_are_trimmed(self, env):
        env["APIHOST"] = " onesearch.test "
        assert load_settings(env).api.host == "onesearch.test"

    def test_message_includes_example(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings({"APIHOST": "h"})
        assert "mcpServers" in exc_info.value.message


class TestOptionalVariables:
    """Tests for PORT, MCP_HOST and logging flags."""

    def test_defaults(self, env):
        settings = load_settings(env)
        assert settings.server.port == DEFAULT_PORT == 1337
        assert settings.server.host == DEFAULT_HOST
        assert settings.logging.enable_file_logging is False
        assert settings.logging.log_directory == "logs"
        assert settings.logging.debug_console is False
        assert settings.api.timeout == 10.0

    def test_overrides(self, env):
        env.update(
            {
                "PORT": "8080",
                "MCP_HOST": "0.0.0.0",
                "MCP_ENABLE_FILE_LOGGING": "true",
                "MCP_LOG_DIRECTORY": "/var/log/onesearch",
                "MCP_DEBUG_CONSOLE": "true",
            }
        )
        settings = load_settings(env)
        assert settings.server.port == 8080
        assert settings.server.host == "0.0.0.0"
        assert settings.logging.enable_file_logging is True
        assert settings.logging.log_directory == "/var/log/onesearch"
        assert settings.logging.debug_console is True

    def test_bad_port(self, env):
        env["PORT"] = "eighty"
        with pytest.raises(ConfigurationError, match="PORT"):
            load_settings(env)

    def test_bad_bool(self, env):
        env["MCP_DEBUG_CONSOLE"] = "yes"
        with pytest.raises(ConfigurationError, match="MCP_DEBUG_CONSOLE"):
            load_settings(env)

    def test_reads_os_environ(self, env, monkeypatch):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        assert load_settings().api.api_user == "test-user"


class TestSettings:
    def test_immutable(self, env):
        settings = load_settings(env)
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.api.host = "other"  # type: ignore[misc]

    def test_api_key_not_in_repr(self, env):
        assert "test-key" not in repr(load_settings(env))

    def test_to_dict(self, env):
        data = load_settings(env).to_dict()
        assert data["api"]["base_url"] == "https://onesearch.test/api/v1"
        assert data["server"]["port"] == 1337
        assert data["logging"]["enable_file_logging"] is False
