"""Delete a song."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from songlib.domain.catalog.exceptions import SongNotFoundError

if TYPE_CHECKING:
    from songlib.application.factories import RepositoryFactory
    from songlib.domain.catalog.repositories import SongRepository

logger = logging.getLogger(__name__)


class DeleteSongCommand:
    def __init__(self, song_repository: SongRepository):
        self._song_repo = song_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteSongCommand:
        return cls(song_repository=factory.song_repository())

    async def execute(self, song_id: int) -> None:
        deleted = await self._song_repo.delete(song_id)
        if not deleted:
            raise SongNotFoundError(song_id)
        logger.info("Song %s deleted", song_id)
