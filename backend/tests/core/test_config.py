"""Configuration — verifies defaults and environment overrides."""

from commerce_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("API_BASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.app_title == "V1 API"
    assert settings.port == 4400
    assert settings.cors_origins == ["*"]
    assert settings.api_base_url == "http://localhost:4400"
    assert settings.loops_form_id is None


def test_env_overrides_are_case_insensitive(monkeypatch):
    monkeypatch.setenv("loops_form_id", "form-7")
    monkeypatch.setenv("PORT", "8080")
    settings = Settings(_env_file=None)
    assert settings.loops_form_id == "form-7"
    assert settings.port == 8080


def test_base_urls_lose_trailing_slash():
    settings = Settings(
        _env_file=None,
        api_base_url="http://api.example.com/",
        loops_base_url="https://loops.example.com//",
    )
    assert settings.api_base_url == "http://api.example.com"
    assert settings.loops_base_url == "https://loops.example.com"
