"""Tests for environment-driven settings and logging setup."""

import logging

import pytest

from todo_api.config import Settings, setup_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for var in ("DATABASE_URL", "SEED_TODOS", "LOG_LEVEL", "STATSIG_SERVER_SECRET"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///./todos.db"
    assert settings.seed_todos == []
    assert settings.statsig_server_secret is None
    assert settings.port == 8000


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("SEED_TODOS", '["buy milk", "walk dog"]')
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite://"
    assert settings.seed_todos == ["buy milk", "walk dog"]
    assert settings.log_level == "DEBUG"


def test_setup_logging_sets_level_and_keeps_one_handler():
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    try:
        setup_logging("warning")
        setup_logging("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == max(len(handlers_before), 1)
    finally:
        root.handlers[:] = handlers_before
        root.setLevel(level_before)
