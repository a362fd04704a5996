"""Tests for environment driven settings."""

import importlib

import pytest

import config


@pytest.fixture
def reload_config(monkeypatch):
    """Restore the environment and reload settings after the test."""
    yield
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(monkeypatch, reload_config):
    for key in ("HOST", "PORT", "LOG_LEVEL", "DOCS_ENABLED", "APP_ENV"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    module = importlib.reload(config)

    assert module.settings.HOST == "0.0.0.0"
    assert module.settings.PORT == 8080
    assert module.settings.LOG_LEVEL == "INFO"
    assert module.settings.DOCS_ENABLED is False
    assert module.Settings.get_server_config() == {
        "host": "0.0.0.0",
        "port": 8080,
        "log_level": "info",
    }


def test_environment_overrides(monkeypatch, reload_config):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    module = importlib.reload(config)

    assert module.Settings.get_server_config() == {
        "host": "127.0.0.1",
        "port": 9000,
        "log_level": "debug",
    }


def test_settings_restored_after_override():
    assert config.settings.PORT == int(config.os.getenv("PORT", "8080"))
