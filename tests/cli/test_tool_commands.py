"""Tests for the tools and call CLI commands."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

import main
from fetchmcp.config import get_config
from fetchmcp.parsing.scraper import FetchError


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch):
    for key in ("SERVER_NAME", "SERVER_VERSION", "FETCH_VISIT_TIMEOUT", "PORT"):
        monkeypatch.delenv(key, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


class TestToolsCommand:
    def test_prints_schemas(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main.main(["tools"])

        assert exit_code == 0
        schemas = json.loads(capsys.readouterr().out)
        assert "fetch_multi" in [schema["name"] for schema in schemas]


class TestCallCommand:
    """Tests for the call command."""

    def test_call_with_string_args(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main.main(["call", "echo", "--arg", "text=hi there"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "Echo: hi there"

    def test_call_with_json_args(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main.main(["call", "add", "--json", '{"a": 2, "b": 3}'])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "2.00 + 3.00 = 5.00"

    def test_error_result_exits_non_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "fetchmcp.parsing.scraper.Scraper.fetch_to_markdown",
            side_effect=FetchError("http fallback failed: unexpected status: 404"),
        ):
            exit_code = main.main(["call", "fetch_md", "--arg", "url=https://example.com"])

        assert exit_code == 1
        assert "unexpected status: 404" in capsys.readouterr().out

    def test_unknown_tool(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main.main(["call", "missing"])

        assert exit_code == 1
        assert "Unknown tool: missing" in capsys.readouterr().err

    def test_malformed_arg(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main.main(["call", "echo", "--arg", "novalue"])

        assert exit_code == 1
        assert "KEY=VALUE" in capsys.readouterr().err
