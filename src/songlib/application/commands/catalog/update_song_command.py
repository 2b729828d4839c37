"""Full and partial song updates."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any, Mapping, Optional

from songlib.domain.catalog.exceptions import SongNotFoundError

if TYPE_CHECKING:
    from songlib.application.factories import RepositoryFactory
    from songlib.domain.catalog.entities import Song
    from songlib.domain.catalog.repositories import SongRepository

logger = logging.getLogger(__name__)


class UpdateSongCommand:
    """Replace every editable field of a song.

    Values are stored as given; enrichment is not re-run.
    """

    def __init__(self, song_repository: SongRepository):
        self._song_repo = song_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateSongCommand:
        return cls(song_repository=factory.song_repository())

    async def execute(  # NOQA: PLR0913
        self,
        song_id: int,
        group: str,
        song: str,
        release_date: Optional[date] = None,
        text: str = "",
        link: str = "",
    ) -> Song:
        existing = await self._song_repo.find_by_id(song_id)
        if existing is None:
            raise SongNotFoundError(song_id)

        existing.replace_details(
            group=group,
            song=song,
            release_date=release_date,
            text=text,
            link=link,
        )
        updated = await self._song_repo.update(existing)

        logger.info("Song %s updated", song_id)
        return updated


class PatchSongCommand:
    """Overwrite only the given fields of a song.

    Field names are checked against the known song fields; an unknown name
    rejects the whole change set.
    """

    def __init__(self, song_repository: SongRepository):
        self._song_repo = song_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> PatchSongCommand:
        return cls(song_repository=factory.song_repository())

    async def execute(self, song_id: int, changes: Mapping[str, Any]) -> Song:
        existing = await self._song_repo.find_by_id(song_id)
        if existing is None:
            raise SongNotFoundError(song_id)

        if not changes:
            return existing

        existing.apply_changes(changes)
        updated = await self._song_repo.update(existing)

        logger.info(
            "Song %s partially updated (fields: %s)",
            song_id,
            ", ".join(sorted(changes)),
        )
        return updated
