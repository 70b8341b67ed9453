"""Tests for the stdio transport loop."""

from __future__ import annotations

import io
import json

from fetchmcp.mcp import MCPServer, ToolRegistry, build_tool
from fetchmcp.mcp.stdio import run_stdio


def _server() -> MCPServer:
    registry = ToolRegistry()
    registry.register_tool(build_tool("ping", handler=lambda ctx: ctx.text("pong")))
    return MCPServer(registry, name="stdio-test")


def _run(lines: list[str]) -> list[dict]:
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    run_stdio(_server(), stdin=stdin, stdout=stdout)
    return [json.loads(line) for line in stdout.getvalue().splitlines()]


class TestRunStdio:
    """Tests for run_stdio."""

    def test_answers_each_request_in_order(self) -> None:
        responses = _run(
            [
                json.dumps({"jsonrpc": "2.0", "id": 1, "method": "initialize"}),
                json.dumps({"jsonrpc": "2.0", "method": "notifications/initialized"}),
                json.dumps(
                    {"jsonrpc": "2.0", "id": 2, "method": "tools/call", "params": {"name": "ping"}}
                ),
            ]
        )

        assert [response["id"] for response in responses] == [1, 2]
        assert responses[0]["result"]["serverInfo"]["name"] == "stdio-test"
        assert responses[1]["result"]["content"][0]["text"] == "pong"

    def test_parse_error_does_not_stop_loop(self) -> None:
        responses = _run(
            [
                "{broken",
                "",
                json.dumps({"jsonrpc": "2.0", "id": 3, "method": "tools/list"}),
            ]
        )

        assert responses[0]["error"]["code"] == -32700
        assert responses[1]["id"] == 3
        assert responses[1]["result"]["tools"][0]["name"] == "ping"
