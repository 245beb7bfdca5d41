"""
Settings loading from the environment and from .env files.
"""

import os

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from clinicvoice.app import create_app
from clinicvoice.core.config import (
    CORSSettings,
    ElevenLabsSettings,
    LoggingSettings,
    Settings,
    StoreSettings,
    _load_env_file_if_available,
    get_settings,
    reset_settings,
)


@pytest.fixture
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults(monkeypatch):
    monkeypatch.delenv("STORE_SUMMARY_CACHE_TTL_SECONDS", raising=False)
    monkeypatch.delenv("STORE_SEED_DIR", raising=False)
    store = StoreSettings()
    assert store.summary_cache_ttl_seconds == 3600
    assert store.seed_dir is None


def test_prefixed_env_vars(monkeypatch):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "sk_test")
    monkeypatch.setenv("ELEVENLABS_AGENT_ID", "agent_123")
    monkeypatch.setenv("STORE_SUMMARY_CACHE_TTL_SECONDS", "120")
    monkeypatch.setenv("EMAIL_CLINIC_NAME", "Sunrise Family Clinic")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()
    assert settings.elevenlabs.is_configured
    assert settings.elevenlabs.agent_configured
    assert settings.store.summary_cache_ttl_seconds == 120
    assert settings.email.clinic_name == "Sunrise Family Clinic"
    assert settings.logging.level == "DEBUG"


def test_placeholder_agent_id_is_not_configured(monkeypatch):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "sk_test")
    monkeypatch.setenv("ELEVENLABS_AGENT_ID", "your_agent_id_here")
    assert ElevenLabsSettings().agent_configured is False


def test_cors_origins_from_json_list(monkeypatch):
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", '["http://a.test", "http://b.test"]')
    assert CORSSettings().allowed_origins == ["http://a.test", "http://b.test"]


def test_invalid_values_are_rejected(monkeypatch):
    monkeypatch.setenv("STORE_SUMMARY_CACHE_TTL_SECONDS", "-1")
    with pytest.raises(ValidationError):
        StoreSettings()

    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        LoggingSettings()

    with pytest.raises(ValidationError):
        ElevenLabsSettings(stability=1.5)


def test_get_settings_is_cached(fresh_settings):
    assert get_settings() is get_settings()
    first = get_settings()
    reset_settings()
    assert get_settings() is not first


def test_env_file_found_in_parent_directory(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("CLINICVOICE_TEST_MARKER=from_parent\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    monkeypatch.delenv("CLINICVOICE_TEST_MARKER", raising=False)

    try:
        _load_env_file_if_available()
        assert os.getenv("CLINICVOICE_TEST_MARKER") == "from_parent"
    finally:
        os.environ.pop("CLINICVOICE_TEST_MARKER", None)


def test_env_file_does_not_override_environment(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("CLINICVOICE_TEST_MARKER=from_file\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CLINICVOICE_TEST_MARKER", "already_set")

    _load_env_file_if_available()
    assert os.getenv("CLINICVOICE_TEST_MARKER") == "already_set"


def test_cors_origins_comma_separated(monkeypatch):
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "http://a.test, http://b.test")
    assert CORSSettings().allowed_origins == ["http://a.test", "http://b.test"]


def test_production_hides_api_docs(monkeypatch, fresh_settings):
    monkeypatch.setenv("APP_ENV", "production")
    client = TestClient(create_app())
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404
    assert client.get("/").json()["docs"] is None


def test_development_serves_api_docs(monkeypatch, fresh_settings):
    monkeypatch.setenv("APP_ENV", "development")
    client = TestClient(create_app())
    assert client.get("/docs").status_code == 200
    assert client.get("/").json()["docs"] == "/docs"
