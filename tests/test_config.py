"""Tests for settings loading."""

import pytest

from study_planner.config import ConfigError, Settings


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("LOVABLE_API_KEY", "env-key")
    monkeypatch.setenv("GATEWAY_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("STRICT_STARTUP", "true")

    config = Settings()

    assert config.require_gateway_key() == "env-key"
    assert config.gateway_timeout_seconds == 5
    assert config.strict_startup is True


def test_require_gateway_key_fails_fast_when_missing():
    with pytest.raises(ConfigError, match="LOVABLE_API_KEY is not configured"):
        Settings(lovable_api_key="").require_gateway_key()


def test_client_timeout_read_from_environment(monkeypatch):
    monkeypatch.setenv("PLANNER_TIMEOUT_SECONDS", "12")

    assert Settings().planner_timeout_seconds == 12
    assert Settings(planner_timeout_seconds=30).planner_timeout_seconds == 30
