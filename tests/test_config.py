"""Tests for environment-based configuration."""

from __future__ import annotations

import pytest

from fetchmcp.config import ServerConfig, get_config


class TestServerConfig:
    def test_defaults(self) -> None:
        config = ServerConfig.from_env({})

        assert config.server_name == "fetchmcp"
        assert config.server_version == "1.0.0"
        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.log_level == "INFO"
        assert config.visit_timeout is None
        assert config.github_token is None
        assert config.github_api_url == "https://api.github.com"

    def test_reads_environment(self) -> None:
        config = ServerConfig.from_env(
            {
                "SERVER_NAME": "docs-bot",
                "SERVER_VERSION": "2.0.0",
                "HOST": "127.0.0.1",
                "PORT": "9000",
                "LOG_LEVEL": "debug",
                "FETCH_VISIT_TIMEOUT": "15",
                "GITHUB_TOKEN": "ghp_x",
            }
        )

        assert config.server_name == "docs-bot"
        assert config.server_version == "2.0.0"
        assert config.host == "127.0.0.1"
        assert config.port == 9000
        assert config.log_level == "DEBUG"
        assert config.visit_timeout == 15.0
        assert config.github_token == "ghp_x"

    def test_empty_values_fall_back_to_defaults(self) -> None:
        config = ServerConfig.from_env({"SERVER_NAME": "", "PORT": ""})
        assert config.server_name == "fetchmcp"
        assert config.port == 8080

    def test_gh_token_preferred(self) -> None:
        config = ServerConfig.from_env({"GH_TOKEN": "first", "GITHUB_TOKEN": "second"})
        assert config.github_token == "first"

    @pytest.mark.parametrize(
        "env, variable",
        [
            ({"PORT": "eighty"}, "PORT"),
            ({"FETCH_VISIT_TIMEOUT": "soon"}, "FETCH_VISIT_TIMEOUT"),
            ({"FETCH_VISIT_TIMEOUT": "0"}, "FETCH_VISIT_TIMEOUT"),
        ],
    )
    def test_invalid_numbers_name_the_variable(self, env, variable) -> None:
        with pytest.raises(ValueError, match=variable):
            ServerConfig.from_env(env)

    def test_get_config_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        get_config.cache_clear()
        monkeypatch.setenv("SERVER_NAME", "cached")
        try:
            first = get_config()
            monkeypatch.setenv("SERVER_NAME", "changed")
            assert get_config() is first
            assert first.server_name == "cached"
        finally:
            get_config.cache_clear()
