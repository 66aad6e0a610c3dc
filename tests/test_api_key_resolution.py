from core.config import DEFAULT_MODEL, Settings, get_settings, load_settings, resolve_api_key


def test_resolve_api_key_prefers_explicit(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-value")
    assert resolve_api_key(" explicit ", "GEMINI_API_KEY") == "explicit"


def test_resolve_api_key_falls_back_to_first_non_empty_env(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    assert resolve_api_key(None, "GEMINI_API_KEY", "GOOGLE_API_KEY") == "google-value"


def test_resolve_api_key_ignores_blank_values(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    assert resolve_api_key("", "GEMINI_API_KEY", "GOOGLE_API_KEY") == ""


def test_load_settings_supports_google_api_key_env(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    settings = load_settings()
    assert settings.has_api_key is True
    assert settings.api_key == "google-value"


def test_load_settings_reads_model_and_dev_flag(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "abc")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-custom")
    monkeypatch.setenv("APP_ENV", "Development")
    monkeypatch.setenv("CORS_ALLOW_ORIGIN", "https://cards.example.com")
    settings = load_settings()
    assert settings.model == "gemini-custom"
    assert settings.expose_error_details is True
    assert settings.cors_allow_origin == "https://cards.example.com"


def test_load_settings_defaults(monkeypatch):
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "GEMINI_MODEL", "APP_ENV", "CORS_ALLOW_ORIGIN"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.has_api_key is False
    assert settings.model == DEFAULT_MODEL
    assert settings.expose_error_details is False
    assert settings.cors_allow_origin == "*"


def test_get_settings_is_loaded_once(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setenv("GEMINI_API_KEY", "first")
    first = get_settings()
    monkeypatch.setenv("GEMINI_API_KEY", "second")
    assert get_settings() is first
    assert first.api_key == "first"
    get_settings.cache_clear()


def test_api_key_prefix_never_reveals_full_key():
    assert Settings(api_key="AIzaSyVerySecretValue").api_key_prefix == "AIzaSy..."
    assert Settings(api_key="").api_key_prefix == "NOT SET"
