"""Settings for the song catalog, read from the environment.

Lookup order for a value:
1. Process environment
2. The env file named by SONGLIB_ENV_FILE
3. config/.env.dev, else config/.env
4. The defaults below
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "SONGLIB_ENV_FILE"
_ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _find_project_root() -> Path:
    """Return the nearest ancestor holding a config/ dir or a git checkout."""
    here = Path(__file__).resolve().parent
    for directory in (here, *here.parents):
        if (directory / "config").is_dir() or (directory / ".git").is_dir():
            return directory
    return here.parents[1]


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()
    for name in _ENV_FILE_CANDIDATES:
        candidate = config_dir / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Catalog service configuration.

    Field names map to upper-case environment variables
    (``external_api_url`` -> ``EXTERNAL_API_URL``). The database URL is
    taken from ``DATABASE_URL`` when present and otherwise assembled from
    the ``POSTGRES_*`` values.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Music Library"
    debug: bool = False
    log_level: str = "INFO"

    # Song store
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "songlib"
    database_url_override: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url_override"),
    )
    db_pool_size: int = 5
    db_max_overflow: int = 5
    db_pool_recycle_seconds: int = 3600

    # HTTP API
    api_host: str = "0.0.0.0"
    api_port: int = 5050
    api_debug: bool = False
    api_cors_origins: str = ""

    # Enrichment sources
    external_api_url: str | None = None
    song_info_timeout: float = 10.0
    song_enrichment_file: str = "song_enrichment.json"

    # `songlib serve-upstream`
    upstream_host: str = "0.0.0.0"
    upstream_port: int = 5051

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        origins = (part.strip() for part in self.api_cors_origins.split(","))
        return [origin for origin in origins if origin]

    @property
    def database_type(self) -> str:
        """``"sqlite"`` or ``"postgresql"``, from the URL scheme."""
        if self.database_url.startswith("sqlite"):
            return "sqlite"
        return "postgresql"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
