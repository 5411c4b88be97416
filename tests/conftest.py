from __future__ import annotations

import pytest

from chat_relay.core.settings import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "GEMINI_MODEL",
        "CHAT_HISTORY_ENABLED",
        "GENERIC_ERROR_MESSAGE",
        "LOG_LEVEL",
        "SDK_LOG_LEVEL",
        "HOST",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings():
    """Build Settings from env-style keyword overrides, ignoring any .env file."""

    def _make(**env) -> Settings:
        values = {"GEMINI_API_KEY": "test-key", "STATIC_DIR": "does-not-exist"}
        values.update(env)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()
