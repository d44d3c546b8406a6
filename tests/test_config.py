"""Tests for settings and CLI wiring."""

import pytest
from pydantic import ValidationError

from supervisor_agent.config import RemoteServerConfig, Settings
from supervisor_agent.exceptions import MaxIterationsExceededError, RateLimitError
from supervisor_agent.main import (
    build_booking_supervisor,
    build_remote_supervisor,
    load_yaml_config,
    run_once,
)

ENV_VARS = [
    "OPENAI_API_KEY",
    "DASHSCOPE_API_KEY",
    "LLM_PROVIDER",
    "LLM_MODEL",
    "SUPERVISOR_AGENT_MAX_ITERATIONS",
]


@pytest.fixture
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.max_iterations == 20
        assert settings.llm_temperature == 0.7
        assert settings.detect_provider() is None

    def test_detect_provider_prefers_dashscope(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-openai")
        clean_env.setenv("DASHSCOPE_API_KEY", "sk-dashscope")
        settings = Settings(_env_file=None)
        assert settings.detect_provider() == "dashscope"
        assert settings.get_api_key_for_provider("openai") == "sk-openai"

    def test_explicit_provider_wins(self, clean_env):
        clean_env.setenv("DASHSCOPE_API_KEY", "sk-dashscope")
        clean_env.setenv("LLM_PROVIDER", "openai")
        assert Settings(_env_file=None).detect_provider() == "openai"

    def test_max_iterations_from_env(self, clean_env):
        clean_env.setenv("SUPERVISOR_AGENT_MAX_ITERATIONS", "5")
        assert Settings(_env_file=None).max_iterations == 5

    def test_remote_server_config(self):
        config = RemoteServerConfig(url="https://example.com/sse")
        assert config.headers == {}
        assert config.transport == "sse"
        with pytest.raises(ValidationError):
            RemoteServerConfig(url="https://example.com", transport="stdio")


class TestMain:
    """Tests for CLI helpers."""

    def test_load_missing_yaml(self, tmp_path):
        assert load_yaml_config(str(tmp_path / "missing.yaml")) == {}

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("llm:\n  provider: dashscope\nremote_tools:\n  maps:\n    url: https://example.com/sse\n")
        config = load_yaml_config(str(path))
        assert config["llm"]["provider"] == "dashscope"
        assert config["remote_tools"]["maps"]["url"] == "https://example.com/sse"

    def test_booking_supervisor_roster(self, mock_client):
        supervisor = build_booking_supervisor(mock_client, max_iterations=5)
        assert [agent.name for agent in supervisor.agents] == ["hotel_assistant", "flight_assistant"]
        assert all(agent.max_iterations == 5 for agent in supervisor.agents)

    def test_remote_supervisor_requires_config(self, mock_client, capsys):
        assert build_remote_supervisor(mock_client, {}, max_iterations=5) is None
        assert "remote_tools" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "remote_tools",
        [
            {"maps": None},
            {"maps": {"url": "wss://example.com", "transport": "websocket"}},
            ["https://example.com/sse"],
        ],
    )
    def test_remote_supervisor_rejects_bad_config(self, mock_client, capsys, remote_tools):
        config = {"remote_tools": remote_tools}
        assert build_remote_supervisor(mock_client, config, max_iterations=5) is None
        assert "Error:" in capsys.readouterr().out

    def test_run_once_prints_answer(self, mock_client, make_response, capsys):
        mock_client.generate.return_value = make_response("All booked.")
        supervisor = build_booking_supervisor(mock_client, max_iterations=5)
        assert run_once(supervisor, "book") is True
        assert "All booked." in capsys.readouterr().out

    @pytest.mark.parametrize(
        "error, expected",
        [
            (RateLimitError(), "Rate limit exceeded"),
            (MaxIterationsExceededError("supervisor", 5), "Gave up"),
        ],
    )
    def test_run_once_reports_errors(self, mock_client, capsys, error, expected):
        mock_client.generate.side_effect = error
        supervisor = build_booking_supervisor(mock_client, max_iterations=5)
        assert run_once(supervisor, "book") is False
        assert expected in capsys.readouterr().out
