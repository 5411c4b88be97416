from chat_relay.core.settings import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "CORS_ORIGINS", "HOST"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.gemini_api_key is None
    assert settings.api_key_set is False
    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.history_enabled is True
    assert settings.port == 3000
    assert settings.cors_origins == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "from-google")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-pro")
    monkeypatch.setenv("CHAT_HISTORY_ENABLED", "false")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

    settings = Settings(_env_file=None)

    assert settings.gemini_api_key == "from-google"
    assert settings.api_key_set is True
    assert settings.gemini_model == "gemini-pro"
    assert settings.history_enabled is False
    assert settings.port == 8080
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
