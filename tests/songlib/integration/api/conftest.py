"""Pytest fixtures for API integration tests.

Each test runs against a fresh SQLite file database. The upstream song info
service is replaced by an in-process httpx transport whose answers the test
controls, and the enrichment file lives in the test's temporary directory.
"""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from songlib.infrastructure.integration.song_info import (
    EnrichmentOverrideFile,
    SongInfoClient,
)
from songlib.infrastructure.persistence.sqlalchemy.models import Base
from songlib.presentation.api.app import create_app
from songlib.presentation.api.dependencies import (
    get_db_session,
    get_override_source,
    get_song_info_client,
)
from songlib_config.settings import Settings


@dataclass
class FakeSongInfoService:
    """Answers ``GET /info`` from a dict keyed by (group, song)."""

    songs: dict[tuple[str, str], dict] = field(default_factory=dict)
    status_code: int | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code is not None:
            return httpx.Response(self.status_code, json={"error": "forced"})

        key = (request.url.params.get("group"), request.url.params.get("song"))
        if key not in self.songs:
            return httpx.Response(404, json={"error": "song not found"})
        return httpx.Response(200, json=self.songs[key])


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'songs.db'}",
        api_host="127.0.0.1",
        api_port=5050,
        api_debug=True,
        external_api_url="http://song-info.test",
        song_enrichment_file=str(tmp_path / "song_enrichment.json"),
    )


@pytest.fixture
def song_info_service() -> FakeSongInfoService:
    return FakeSongInfoService(
        songs={
            ("Muse", "Supermassive Black Hole"): {
                "release_date": "2006-07-16",
                "text": "Ooh baby, don't you know I suffer?\n\nOoh\nYou set my soul",
                "link": "https://example.com/smbh",
            },
        },
    )


@pytest.fixture
def enrichment_file(api_settings):
    """Path of the (initially absent) enrichment override file."""
    return Path(api_settings.song_enrichment_file)


def _run(coro) -> None:
    """Run a coroutine on a fresh event loop, outside TestClient's loop."""
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def async_engine(api_settings):
    engine = create_async_engine(api_settings.database_url, poolclass=NullPool)

    async def _setup():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    _run(_setup())
    yield engine
    _run(engine.dispose())


@pytest.fixture
def test_client(api_settings, async_engine, song_info_service, enrichment_file):
    """Create a test client bound to the test database and fake upstream."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    song_info_client = SongInfoClient(
        api_settings.external_api_url,
        transport=httpx.MockTransport(song_info_service.handler),
    )

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_song_info_client] = lambda: song_info_client
    app.dependency_overrides[get_override_source] = lambda: EnrichmentOverrideFile(
        enrichment_file
    )

    yield TestClient(app)
