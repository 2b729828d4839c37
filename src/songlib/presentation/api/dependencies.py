"""Request-scoped and process-wide dependencies of the catalog API.

Process-wide objects (engine, session maker, upstream client) are built
lazily and cached; a request gets its own session and a repository factory
bound to it.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from songlib.infrastructure.integration.song_info import (
    EnrichmentOverrideFile,
    SongInfoClient,
)
from songlib.infrastructure.persistence.sqlalchemy.models.base import Base
from songlib.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from songlib.presentation.api.config import get_api_settings
from songlib_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """Database URL from settings; a SQLite file gets its folder created."""
    url = get_settings().database_url

    if url.startswith("sqlite") and ":memory:" not in url:
        Path(url.split("///", 1)[-1]).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Song store
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Shared async engine.

    SQLite uses SQLAlchemy's default pool. PostgreSQL gets the pool size,
    overflow and recycle time from settings, with pre-ping enabled.
    """
    url = get_database_url()
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False)

    settings = get_settings()
    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle_seconds,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request; routers decide when to commit."""
    async with get_session_maker()() as session:
        yield session


async def create_tables() -> None:
    """Create missing tables. Existing tables are left as they are."""
    logger.info("Checking song store schema...")
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Song store schema ready")


async def drop_tables() -> None:
    """Drop every table, deleting the whole catalog."""
    logger.warning("Dropping all song store tables")
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# -----------------------------------------------------------------------------
# Enrichment sources
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_song_info_client() -> SongInfoClient:
    """Shared upstream client; closed by the app lifespan."""
    settings = get_settings()
    return SongInfoClient(
        base_url=settings.external_api_url,
        timeout=settings.song_info_timeout,
    )


def get_override_source(
    settings: Settings = Depends(get_api_settings),
) -> EnrichmentOverrideFile:
    return EnrichmentOverrideFile(settings.song_enrichment_file)


# -----------------------------------------------------------------------------
# Repository factory
# -----------------------------------------------------------------------------


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    song_info_client: SongInfoClient = Depends(get_song_info_client),
    override_source: EnrichmentOverrideFile = Depends(get_override_source),
) -> SQLAlchemyRepositoryFactory:
    """
    Repository factory for the current request.

    Commands, queries and services build themselves from it through their
    ``from_factory`` classmethods.
    """
    return SQLAlchemyRepositoryFactory(
        session=session,
        song_info_provider=song_info_client,
        override_source=override_source,
    )


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
