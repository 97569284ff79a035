"""
Startup configuration read from environment variables.

Required:
    APIHOST  OneSearch API host (base URL is https://{APIHOST}/api/v1)
    APIKEY   API key, sent as the ``apikey`` header
    APIUSER  API user, sent as the ``apiuser`` header

Optional:
    PORT                     HTTP transport port (default 1337)
    MCP_HOST                 HTTP transport bind host (default 127.0.0.1)
    MCP_ENABLE_FILE_LOGGING  "true"/"false" (default false)
    MCP_LOG_DIRECTORY        log file directory (default "logs")
    MCP_DEBUG_CONSOLE        "true"/"false" (default false)

Settings are validated once and are immutable afterwards.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any

from onesearch_mcp.core.exceptions import ConfigurationError
from onesearch_mcp.infrastructure.onesearch.client import DEFAULT_TIMEOUT

if TYPE_CHECKING:
    from collections.abc import Mapping

REQUIRED_VARIABLES = ("APIHOST", "APIKEY", "APIUSER")

DEFAULT_PORT = 1337
DEFAULT_HOST = "127.0.0.1"
DEFAULT_LOG_DIRECTORY = "logs"

_EXAMPLE_CLIENT_CONFIG = {
    "mcpServers": {
        "onesearch": {
            "command": "onesearch-mcp",
            "env": {
                "APIHOST": "onesearch-api.example.org",
                "APIKEY": "your-api-key",
                "APIUSER": "your-api-user",
            },
        }
    }
}


@dataclass(frozen=True, slots=True)
class ApiSettings:
    host: str
    api_key: str = field(repr=False)
    api_user: str
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        return f"https://{self.host}/api/v1"


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    enable_file_logging: bool = False
    log_directory: str = DEFAULT_LOG_DIRECTORY
    debug_console: bool = False


@dataclass(frozen=True, slots=True)
class Settings:
    api: ApiSettings
    server: ServerSettings = field(default_factory=ServerSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for ``providers.Configuration.from_dict``."""
        data = asdict(self)
        data["api"]["base_url"] = self.api.base_url
        return data


def _parse_bool(name: str, raw: str | None, default: bool) -> bool:
    if raw is None or raw == "":
        return default
    if raw not in ("true", "false"):
        raise ConfigurationError(f"{name} must be 'true' or 'false', got {raw!r}")
    return raw == "true"


def _parse_port(raw: str | None) -> int:
    if raw is None or raw == "":
        return DEFAULT_PORT
    if not raw.isdigit():
        raise ConfigurationError(f"PORT must be a number, got {raw!r}")
    return int(raw)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Validate the environment and build Settings.

    Raises:
        ConfigurationError: If a required variable is missing/empty or an
            optional one is malformed.
    """
    env = os.environ if environ is None else environ

    values = {name: (env.get(name) or "").strip() for name in REQUIRED_VARIABLES}
    missing = [name for name, value in values.items() if not value]
    if missing:
        message = "\n".join(
            [
                "Environment validation failed:",
                f"Missing required variables: {', '.join(missing)}",
                "Please ensure these environment variables are set in your MCP server configuration.",
                "Example MCP client configuration:",
                json.dumps(_EXAMPLE_CLIENT_CONFIG, indent=2),
            ]
        )
        raise ConfigurationError(message, missing=missing)

    return Settings(
        api=ApiSettings(
            host=values["APIHOST"],
            api_key=values["APIKEY"],
            api_user=values["APIUSER"],
        ),
        server=ServerSettings(
            host=env.get("MCP_HOST") or DEFAULT_HOST,
            port=_parse_port(env.get("PORT")),
        ),
        logging=LoggingSettings(
            enable_file_logging=_parse_bool("MCP_ENABLE_FILE_LOGGING", env.get("MCP_ENABLE_FILE_LOGGING"), False),
            log_directory=env.get("MCP_LOG_DIRECTORY") or DEFAULT_LOG_DIRECTORY,
            debug_console=_parse_bool("MCP_DEBUG_CONSOLE", env.get("MCP_DEBUG_CONSOLE"), False),
        ),
    )


__all__ = [
    "REQUIRED_VARIABLES",
    "ApiSettings",
    "LoggingSettings",
    "ServerSettings",
    "Settings",
    "load_settings",
]
