"""Get song query - fetch one song by ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

from songlib.domain.catalog.exceptions import SongNotFoundError

if TYPE_CHECKING:
    from songlib.application.factories import RepositoryFactory
    from songlib.domain.catalog.entities import Song
    from songlib.domain.catalog.repositories import SongRepository


class GetSongQuery:
    """Query to fetch a single song."""

    def __init__(self, song_repository: SongRepository):
        self._song_repo = song_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetSongQuery:
        return cls(song_repository=factory.song_repository())

    async def execute(self, song_id: int) -> Song:
        song = await self._song_repo.find_by_id(song_id)
        if song is None:
            raise SongNotFoundError(song_id)
        return song
