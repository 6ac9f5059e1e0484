"""Tests for config module."""

from wow_guide.config import Settings, get_settings, reload_settings


def test_settings_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_key is None
    assert settings.api_url == "https://api.perplexity.ai/chat/completions"
    assert settings.model == "sonar"
    assert settings.api_timeout == 30.0
    assert settings.temperature == 0.3
    assert settings.top_p == 0.9
    assert settings.max_tokens == 1024
    assert settings.port == 3000
    assert settings.guide_language == "Polish"
    assert settings.log_level == "INFO"
    assert settings.blizzard_region == "eu"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("WOW_GUIDE_API_KEY", "pplx-test")
    monkeypatch.setenv("WOW_GUIDE_MODEL", "sonar-pro")
    monkeypatch.setenv("WOW_GUIDE_PORT", "8080")
    monkeypatch.setenv("WOW_GUIDE_API_TIMEOUT", "10.5")

    settings = reload_settings()

    assert settings.api_key == "pplx-test"
    assert settings.model == "sonar-pro"
    assert settings.port == 8080
    assert settings.api_timeout == 10.5


def test_settings_ignores_extra_env_vars(monkeypatch):
    monkeypatch.setenv("WOW_GUIDE_UNKNOWN_VAR", "value")

    settings = reload_settings()

    assert not hasattr(settings, "unknown_var")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_port_from_platform_env(monkeypatch):
    monkeypatch.setenv("PORT", "10000")

    assert reload_settings().port == 10000


def test_prefixed_port_wins_over_platform_env(monkeypatch):
    monkeypatch.setenv("PORT", "10000")
    monkeypatch.setenv("WOW_GUIDE_PORT", "8080")

    assert reload_settings().port == 8080
