"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from songlib.application.ports import EnrichmentOverrideSource, SongInfoProvider
from songlib.domain.catalog.repositories import SongRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories and collaborator adapters."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def song_repository(self) -> SongRepository:
        """Get song repository."""
        ...

    def song_info_provider(self) -> SongInfoProvider:
        """Get the upstream song info provider."""
        ...

    def enrichment_override_source(self) -> EnrichmentOverrideSource:
        """Get the local enrichment override source."""
        ...
