"""Application layer queries."""

from songlib.application.queries.get_song_query import GetSongQuery
from songlib.application.queries.get_song_verses_query import GetSongVersesQuery
from songlib.application.queries.list_songs_query import (
    ListSongsQuery,
    SongListResult,
)

__all__ = [
    "GetSongQuery",
    "GetSongVersesQuery",
    "ListSongsQuery",
    "SongListResult",
]
