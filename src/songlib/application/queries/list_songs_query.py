"""List songs query - filtered, paginated view over the catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from songlib.domain.catalog.value_objects import (
    DEFAULT_LIST_LIMIT,
    PageRequest,
    SongFilter,
    parse_release_date,
)

if TYPE_CHECKING:
    from songlib.application.factories import RepositoryFactory
    from songlib.domain.catalog.entities import Song
    from songlib.domain.catalog.repositories import SongRepository


@dataclass
class SongListResult:
    """One page of songs matching a filter."""

    songs: list[Song]
    page: int
    limit: int


class ListSongsQuery:
    """Query to list songs matching optional field criteria.

    Paging is lenient: an invalid page or limit falls back to (1, 10), and a
    page beyond the last match is simply empty.
    """

    def __init__(self, song_repository: SongRepository):
        self._song_repo = song_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListSongsQuery:
        return cls(song_repository=factory.song_repository())

    async def execute(
        self,
        criteria: Optional[SongFilter] = None,
        page: Any = None,
        limit: Any = None,
    ) -> SongListResult:
        criteria = criteria or SongFilter()
        if criteria.release_date is not None:
            parse_release_date(criteria.release_date)

        page_request = PageRequest.from_raw(
            page,
            limit,
            default_limit=DEFAULT_LIST_LIMIT,
        )
        songs = await self._song_repo.find_matching(criteria, page_request)

        return SongListResult(
            songs=songs,
            page=page_request.page,
            limit=page_request.limit,
        )
