"""Tests for settings loading."""

from dataclasses import FrozenInstanceError

import pytest

from bizanalytics.config import DEFAULT_MODEL, Settings, load_settings


def test_defaults_without_environment():
    settings = load_settings(use_dotenv=False)

    assert settings.api_key is None
    assert settings.model == DEFAULT_MODEL
    assert settings.log_level == "WARNING"
    assert not settings.insights_enabled


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("API_KEY", "secret")
    monkeypatch.setenv("BIZANALYTICS_MODEL", "gemini-2.0-flash")
    monkeypatch.setenv("BIZANALYTICS_LOG_LEVEL", "debug")

    settings = load_settings(use_dotenv=False)

    assert settings.api_key == "secret"
    assert settings.model == "gemini-2.0-flash"
    assert settings.log_level == "DEBUG"
    assert settings.insights_enabled


def test_empty_api_key_is_missing(monkeypatch):
    monkeypatch.setenv("API_KEY", "")
    assert load_settings(use_dotenv=False).api_key is None


def test_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("API_KEY=from-dotenv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    # Register API_KEY with monkeypatch so the value loaded below is removed afterwards
    monkeypatch.setenv("API_KEY", "placeholder")
    monkeypatch.delenv("API_KEY")

    settings = load_settings()

    assert settings.api_key == "from-dotenv"


def test_settings_are_frozen():
    settings = Settings(api_key="x")
    with pytest.raises(FrozenInstanceError):
        settings.api_key = "y"


@pytest.mark.parametrize("value", ["verbose", "", "  "])
def test_unknown_log_level_falls_back_to_warning(monkeypatch, value):
    monkeypatch.setenv("BIZANALYTICS_LOG_LEVEL", value)

    assert load_settings(use_dotenv=False).log_level == "WARNING"


def test_log_level_is_trimmed(monkeypatch):
    monkeypatch.setenv("BIZANALYTICS_LOG_LEVEL", " info ")

    assert load_settings(use_dotenv=False).log_level == "INFO"
