"""Get song verses query - one page of a song's lyric text."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Optional

from songlib.domain.catalog.exceptions import SongNotFoundError
from songlib.domain.catalog.services import VerseParagraphPaginator
from songlib.domain.catalog.value_objects import DEFAULT_VERSE_LIMIT, PageRequest

if TYPE_CHECKING:
    from songlib.application.factories import RepositoryFactory
    from songlib.domain.catalog.repositories import SongRepository
    from songlib.domain.catalog.value_objects import VersePage

logger = logging.getLogger(__name__)


class GetSongVersesQuery:
    """Query to page through the verses of a stored song."""

    def __init__(
        self,
        song_repository: SongRepository,
        paginator: Optional[VerseParagraphPaginator] = None,
    ):
        self._song_repo = song_repository
        self._paginator = paginator or VerseParagraphPaginator()

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetSongVersesQuery:
        return cls(song_repository=factory.song_repository())

    async def execute(
        self,
        song_id: int,
        page: Any = None,
        limit: Any = None,
    ) -> VersePage:
        """Return the requested verse page.

        Page and limit default to (1, 1) when missing or invalid.

        Raises
        ------
        SongNotFoundError
            If the song does not exist
        VersePageNotFoundError
            If the page starts past the last verse
        """
        song = await self._song_repo.find_by_id(song_id)
        if song is None:
            raise SongNotFoundError(song_id)

        page_request = PageRequest.from_raw(
            page,
            limit,
            default_limit=DEFAULT_VERSE_LIMIT,
        )
        verse_page = self._paginator.paginate(
            song.text,
            page_request.page,
            page_request.limit,
        )
        logger.debug(
            "Verses %d/%d of song %s (limit=%d)",
            verse_page.page,
            verse_page.total_pages,
            song_id,
            verse_page.limit,
        )
        return replace(verse_page, song_id=song_id)
