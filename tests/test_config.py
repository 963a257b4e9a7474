from __future__ import annotations

from app.config import DEFAULT_PLACEHOLDER_IMAGE, AppSettings


def test_defaults_match_lookup_contract(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    settings = AppSettings()

    assert settings.debounce_seconds == 0.3
    assert str(settings.api.base_url).rstrip("/") == "https://pokeapi.co/api/v2"
    assert settings.presentation.language == "es"
    assert str(settings.presentation.placeholder_image_url) == DEFAULT_PLACEHOLDER_IMAGE
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("POKEDEX_DEBOUNCE_SECONDS", "0.5")
    monkeypatch.setenv("POKEDEX_LOG_LEVEL", "debug")
    monkeypatch.setenv("POKEDEX_API__BASE_URL", "https://mirror.example/v2")
    monkeypatch.setenv("POKEDEX_API__REQUEST_TIMEOUT_SECONDS", "3")
    monkeypatch.setenv("POKEDEX_PRESENTATION__LANGUAGE", " EN ")

    settings = AppSettings()

    assert settings.debounce_seconds == 0.5
    assert settings.log_level == "DEBUG"
    assert str(settings.api.base_url).startswith("https://mirror.example/v2")
    assert settings.api.request_timeout_seconds == 3
    assert settings.presentation.language == "en"


def test_env_file_is_read(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("POKEDEX_ENVIRONMENT=prod\n", encoding="utf-8")

    assert AppSettings().environment == "prod"
