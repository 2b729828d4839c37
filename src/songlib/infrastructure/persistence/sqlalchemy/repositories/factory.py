"""Repository factory for SQLAlchemy-backed catalog access."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from songlib.infrastructure.persistence.sqlalchemy.repositories.catalog import (
    SongRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from songlib.application.ports import (
        EnrichmentOverrideSource,
        SongInfoProvider,
    )
    from songlib.domain.catalog.repositories import SongRepository


class SQLAlchemyRepositoryFactory:
    """
    Factory for repositories sharing one session, plus the adapters for the
    collaborators outside the database.

    Repositories are created lazily and cached for the lifetime of the
    factory (one request).
    """

    def __init__(
        self,
        session: AsyncSession,
        song_info_provider: SongInfoProvider,
        override_source: EnrichmentOverrideSource,
    ):
        self._session = session
        self._song_info_provider = song_info_provider
        self._override_source = override_source
        self._song_repository: SongRepository | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def song_repository(self) -> SongRepository:
        if self._song_repository is None:
            self._song_repository = SongRepositorySQLAlchemy(self._session)
        return self._song_repository

    def song_info_provider(self) -> SongInfoProvider:
        return self._song_info_provider

    def enrichment_override_source(self) -> EnrichmentOverrideSource:
        return self._override_source
