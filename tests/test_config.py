"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from headergrade.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        settings = Settings(_env_file=None)

        assert settings.api_prefix == "/api/v1"
        assert settings.cors_origins == ["http://localhost", "http://127.0.0.1"]

    def test_cors_origins_from_comma_separated_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://a.test, https://b.test")

        settings = Settings(_env_file=None)

        assert settings.cors_origins == ["https://a.test", "https://b.test"]

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
