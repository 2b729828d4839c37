"""Resolve song metadata through the store, the upstream service and overrides."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from songlib.domain.catalog.entities import Song
from songlib.domain.catalog.value_objects import SongDetail, parse_release_date
from songlib.domain.shared.exceptions import ValidationError

if TYPE_CHECKING:
    from songlib.application.factories import RepositoryFactory
    from songlib.application.ports import (
        EnrichmentOverrideSource,
        SongInfoProvider,
    )
    from songlib.domain.catalog.repositories import SongRepository

logger = logging.getLogger(__name__)


class SongEnrichmentService:
    """
    Resolves the metadata of a (group, song) pair.

    Resolution chain:
    1. A stored song with the exact pair is used as-is; the upstream service
       is not called.
    2. Otherwise the upstream service is asked, and the answer is stored as
       a new song.
    3. Finally, a matching entry of the override source replaces release
       date, text and link of the *response*. The stored song is left
       untouched, so the returned detail may differ from the stored record.
    """

    def __init__(
        self,
        song_repository: SongRepository,
        song_info_provider: SongInfoProvider,
        override_source: EnrichmentOverrideSource,
    ):
        self._song_repo = song_repository
        self._provider = song_info_provider
        self._overrides = override_source

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SongEnrichmentService:
        return cls(
            song_repository=factory.song_repository(),
            song_info_provider=factory.song_info_provider(),
            override_source=factory.enrichment_override_source(),
        )

    async def resolve(self, group: str, song: str) -> SongDetail:
        """Return the metadata for a pair, creating the record if needed.

        Raises
        ------
        ValidationError
            If group or song is empty
        UpstreamUnavailableError, UpstreamMalformedError
            If the pair is unknown and the upstream lookup fails
        InvalidDateFormatError
            If the upstream release date is not YYYY-MM-DD
        StorageFailureError
            If the store fails
        """
        if not group or not group.strip() or not song or not song.strip():
            msg = "bad request: missing required parameters"
            raise ValidationError(msg, details={"group": group, "song": song})

        stored = await self._song_repo.find_by_group_and_song(group, song)
        if stored is None:
            stored = await self._create_from_upstream(group, song)
        else:
            logger.debug(
                "Song found in catalog: %s - %s (id=%s)", group, song, stored.id
            )

        detail = SongDetail.from_song(stored)

        override = await self._overrides.find(group, song)
        if override is not None:
            logger.info("Applying enrichment override for %s - %s", group, song)
            detail = detail.overridden_by(override)

        return detail

    async def _create_from_upstream(self, group: str, song: str) -> Song:
        logger.info("Song not in catalog, querying upstream: %s - %s", group, song)
        fetched = await self._provider.fetch_song_detail(group, song)

        new_song = Song(
            group=group,
            song=song,
            release_date=parse_release_date(fetched.release_date),
            text=fetched.text,
            link=fetched.link,
        )
        stored = await self._song_repo.add_if_absent(new_song)

        logger.info("Song stored: %s - %s (id=%s)", group, song, stored.id)
        return stored
