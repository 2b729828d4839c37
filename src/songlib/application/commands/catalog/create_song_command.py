"""Create a song without enrichment."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from songlib.domain.catalog.entities import Song

if TYPE_CHECKING:
    from songlib.application.factories import RepositoryFactory
    from songlib.domain.catalog.repositories import SongRepository

logger = logging.getLogger(__name__)


class CreateSongCommand:
    """Add a bare (group, song) record to the catalog.

    Release date, text and link start empty; they are not looked up.
    """

    def __init__(self, song_repository: SongRepository):
        self._song_repo = song_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateSongCommand:
        return cls(song_repository=factory.song_repository())

    async def execute(self, group: str, song: str) -> Song:
        stored = await self._song_repo.add(Song(group=group, song=song))
        logger.info("Song created: %s - %s (id=%s)", group, song, stored.id)
        return stored
