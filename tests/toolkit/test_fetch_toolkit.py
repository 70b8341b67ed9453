"""Tests for the fetch tool registrations."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from fetchmcp.mcp import MCPServer, ToolRegistry
from fetchmcp.parsing.scraper import FetchError, ScrapeResult
from fetchmcp.toolkit.fetch import register_fetch_tools


@pytest.fixture
def server() -> MCPServer:
    registry = ToolRegistry()
    register_fetch_tools(registry)
    return MCPServer(registry, name="fetch-test")


def _fake_fetch(self, url: str) -> ScrapeResult:
    if "bad" in url:
        raise FetchError("http fallback failed: http fetch failed: refused")
    return ScrapeResult(url=url, title=f"Title {url}", markdown=f"# Title {url}\n\nBody\n\n")


class TestFetchToolSchemas:
    def test_registers_three_tools_with_required_params(self, server: MCPServer) -> None:
        schemas = {schema["name"]: schema for schema in server.registry.list_tools()}

        assert sorted(schemas) == ["fetch", "fetch_md", "fetch_multi"]
        assert schemas["fetch"]["inputSchema"]["required"] == ["url"]
        assert schemas["fetch_md"]["inputSchema"]["required"] == ["url"]
        assert schemas["fetch_multi"]["inputSchema"]["required"] == ["urls"]


class TestFetchTool:
    """Tests for fetch and fetch_md."""

    def test_fetch_returns_json(self, server: MCPServer) -> None:
        with patch("fetchmcp.parsing.scraper.Scraper.fetch_to_markdown", _fake_fetch):
            result = server.call_tool("fetch", {"url": "https://example.com"})

        assert result.is_error is False
        assert json.loads(result.text) == {
            "url": "https://example.com",
            "title": "Title https://example.com",
            "markdown": "# Title https://example.com\n\nBody\n\n",
        }

    def test_fetch_md_returns_markdown_only(self, server: MCPServer) -> None:
        with patch("fetchmcp.parsing.scraper.Scraper.fetch_to_markdown", _fake_fetch):
            result = server.call_tool("fetch_md", {"url": "https://example.com"})

        assert result.is_error is False
        assert result.text == "# Title https://example.com\n\nBody\n\n"

    @pytest.mark.parametrize("tool", ["fetch", "fetch_md"])
    def test_fetch_failure_is_error_result(self, server: MCPServer, tool: str) -> None:
        with patch("fetchmcp.parsing.scraper.Scraper.fetch_to_markdown", _fake_fetch):
            result = server.call_tool(tool, {"url": "https://bad.example.com"})

        assert result.is_error is True
        assert result.text == "fetch failed: http fallback failed: http fetch failed: refused"

    def test_fetch_over_protocol_is_successful_rpc(self, server: MCPServer) -> None:
        with patch("fetchmcp.parsing.scraper.Scraper.fetch_to_markdown", _fake_fetch):
            response = server.handle_request(
                {
                    "jsonrpc": "2.0",
                    "id": 3,
                    "method": "tools/call",
                    "params": {"name": "fetch", "arguments": {"url": "https://bad.example.com"}},
                }
            )

        assert "error" not in response
        assert response["result"]["isError"] is True

    def test_visit_timeout_reaches_scraper(self) -> None:
        registry = ToolRegistry()
        register_fetch_tools(registry, visit_timeout=7.5)
        seen: list[float | None] = []

        def capture(self, url: str) -> ScrapeResult:
            seen.append(self.visit_timeout)
            return ScrapeResult(url=url)

        with patch("fetchmcp.parsing.scraper.Scraper.fetch_to_markdown", capture):
            MCPServer(registry, name="t").call_tool("fetch", {"url": "https://example.com"})

        assert seen == [7.5]


class TestFetchMultiTool:
    """Tests for fetch_multi."""

    def test_results_in_input_order(self, server: MCPServer) -> None:
        with patch("fetchmcp.parsing.scraper.Scraper.fetch_to_markdown", _fake_fetch):
            result = server.call_tool(
                "fetch_multi", {"urls": "https://one.test, https://bad.test ,https://two.test"}
            )

        assert result.is_error is False
        payload = json.loads(result.text)
        results = payload["results"]
        assert [item["url"] for item in results] == [
            "https://one.test",
            "https://bad.test",
            "https://two.test",
        ]
        assert "error" not in results[0]
        assert results[1]["error"] == "http fallback failed: http fetch failed: refused"
        assert results[1]["markdown"] == ""
        assert results[2]["title"] == "Title https://two.test"

    @pytest.mark.parametrize("arguments", [{"urls": " , ,"}, {"urls": ""}, {}, {"urls": 5}])
    def test_no_valid_urls(self, server: MCPServer, arguments) -> None:
        result = server.call_tool("fetch_multi", arguments)

        assert result.is_error is True
        assert result.text == "no valid URLs"
