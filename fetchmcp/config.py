"""Process configuration resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from fetchmcp.integrations.github.docs import DEFAULT_API_URL


def _get_env(environ: Mapping[str, str], key: str, default: str) -> str:
    value = environ.get(key, "")
    return value if value else default


def _parse_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc


def _parse_optional_float(environ: Mapping[str, str], key: str) -> Optional[float]:
    raw = environ.get(key, "")
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be a number of seconds, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class ServerConfig:
    """Settings for the MCP server and its tools.

    Attributes:
        server_name: Name reported in the ``initialize`` response.
        server_version: Version reported in the ``initialize`` response.
        host: Interface the HTTP transport binds to.
        port: Port the HTTP transport listens on.
        log_level: Root logging level name.
        visit_timeout: Timeout in seconds for the primary page visit. ``None``
            keeps the visit unbounded.
        github_token: Optional token for the documentation downloader.
        github_api_url: GitHub REST API base URL.
    """

    server_name: str = "fetchmcp"
    server_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    visit_timeout: Optional[float] = None
    github_token: Optional[str] = None
    github_api_url: str = DEFAULT_API_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServerConfig":
        env = os.environ if environ is None else environ
        return cls(
            server_name=_get_env(env, "SERVER_NAME", cls.server_name),
            server_version=_get_env(env, "SERVER_VERSION", cls.server_version),
            host=_get_env(env, "HOST", cls.host),
            port=_parse_int(env, "PORT", cls.port),
            log_level=_get_env(env, "LOG_LEVEL", cls.log_level).upper(),
            visit_timeout=_parse_optional_float(env, "FETCH_VISIT_TIMEOUT"),
            github_token=env.get("GH_TOKEN") or env.get("GITHUB_TOKEN") or None,
            github_api_url=_get_env(env, "GITHUB_API_URL", cls.github_api_url),
        )


@lru_cache(maxsize=1)
def get_config() -> ServerConfig:
    """Get the singleton configuration instance."""
    return ServerConfig.from_env()
