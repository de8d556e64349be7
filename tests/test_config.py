"""Tests for environment-driven settings."""

from stars_api.app.core.config import Settings


def test_defaults(monkeypatch):
    for var in ("DATABASE_URL", "STRICT_NOT_FOUND", "PORT", "HOST", "LOG_FILE"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings()
    assert settings.database_url == "stars.db"
    assert settings.strict_not_found is False
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.log_file is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", ":memory:")
    monkeypatch.setenv("STRICT_NOT_FOUND", "yes")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings()
    assert settings.database_url == ":memory:"
    assert settings.strict_not_found is True
    assert settings.port == 9000
