"""Tests for centralized settings."""

import pytest

from songlib_config.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "DATABASE_URL",
        "POSTGRES_HOST",
        "POSTGRES_PASSWORD",
        "API_CORS_ORIGINS",
        "EXTERNAL_API_URL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.api_port == 5050
        assert settings.external_api_url is None
        assert settings.song_enrichment_file == "song_enrichment.json"
        assert settings.database_type == "postgresql"

    def test_postgres_url_is_built(self, monkeypatch):
        monkeypatch.setenv("POSTGRES_HOST", "db")
        monkeypatch.setenv("POSTGRES_PASSWORD", "secret")

        settings = Settings(_env_file=None)

        assert settings.database_url == (
            "postgresql+asyncpg://postgres:secret@db:5432/songlib"
        )

    def test_database_url_override(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./data/songs.db")

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./data/songs.db"
        assert settings.database_type == "sqlite"

    def test_cors_origins_are_split(self, monkeypatch):
        monkeypatch.setenv(
            "API_CORS_ORIGINS",
            "http://localhost:3000, http://example.com",
        )

        settings = Settings(_env_file=None)

        assert settings.cors_origins == [
            "http://localhost:3000",
            "http://example.com",
        ]

    def test_external_api_url_from_env(self, monkeypatch):
        monkeypatch.setenv("EXTERNAL_API_URL", "http://localhost:5051")

        assert Settings(_env_file=None).external_api_url == "http://localhost:5051"
