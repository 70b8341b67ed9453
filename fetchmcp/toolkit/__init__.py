"""Convenience helpers for registering the server's tools."""

from __future__ import annotations

from fetchmcp.config import ServerConfig
from fetchmcp.mcp import MCPServer, ToolRegistry

from .basic import register_basic_tools
from .docs import register_docs_tools
from .fetch import register_fetch_tools


def build_registry(config: ServerConfig | None = None) -> ToolRegistry:
    """Create a registry holding every built-in tool."""
    config = config or ServerConfig()
    registry = ToolRegistry()
    register_basic_tools(registry)
    register_fetch_tools(registry, visit_timeout=config.visit_timeout)
    register_docs_tools(registry, token=config.github_token, api_url=config.github_api_url)
    return registry


def build_server(config: ServerConfig | None = None) -> MCPServer:
    """Create an :class:`MCPServer` with the built-in tools registered."""
    config = config or ServerConfig()
    return MCPServer(
        build_registry(config),
        name=config.server_name,
        version=config.server_version,
    )


__all__ = [
    "build_registry",
    "build_server",
    "register_basic_tools",
    "register_docs_tools",
    "register_fetch_tools",
]
