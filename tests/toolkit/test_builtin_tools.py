"""Tests for the default tool set and server assembly."""

from __future__ import annotations

from fetchmcp.config import ServerConfig
from fetchmcp.mcp import MCPServer, ToolRegistry
from fetchmcp.toolkit import build_registry, build_server
from fetchmcp.toolkit.basic import register_basic_tools


def _basic_server() -> MCPServer:
    registry = ToolRegistry()
    register_basic_tools(registry)
    return MCPServer(registry, name="basic")


class TestBasicTools:
    def test_echo(self) -> None:
        result = _basic_server().call_tool("echo", {"text": "hello"})
        assert result.text == "Echo: hello"

    def test_echo_with_wrong_type_echoes_empty(self) -> None:
        result = _basic_server().call_tool("echo", {"text": 12})
        assert result.text == "Echo: "

    def test_add(self) -> None:
        result = _basic_server().call_tool("add", {"a": 1.5, "b": 2})
        assert result.text == "1.50 + 2.00 = 3.50"

    def test_add_missing_arguments_use_zero(self) -> None:
        result = _basic_server().call_tool("add", {"a": "3"})
        assert result.text == "0.00 + 0.00 = 0.00"


class TestBuildServer:
    """Tests for build_registry and build_server."""

    def test_registry_contains_every_tool(self) -> None:
        registry = build_registry()
        assert sorted(registry.names()) == [
            "add",
            "download_docs",
            "download_docs_md",
            "echo",
            "fetch",
            "fetch_md",
            "fetch_multi",
        ]

    def test_tools_list_required_matches_registration(self) -> None:
        schemas = {schema["name"]: schema for schema in build_registry().list_tools()}

        assert schemas["add"]["inputSchema"]["required"] == ["a", "b"]
        assert schemas["download_docs"]["inputSchema"]["required"] == ["repo"]
        assert set(schemas["download_docs"]["inputSchema"]["properties"]) == {"repo", "path"}

    def test_server_identity_comes_from_config(self) -> None:
        server = build_server(ServerConfig(server_name="custom", server_version="2.3.4"))
        response = server.handle_request({"jsonrpc": "2.0", "id": 1, "method": "initialize"})

        assert response["result"]["serverInfo"] == {"name": "custom", "version": "2.3.4"}
