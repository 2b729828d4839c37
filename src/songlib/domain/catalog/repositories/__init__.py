"""Catalog repository interfaces."""

from songlib.domain.catalog.repositories.song_repository import SongRepository

__all__ = [
    "SongRepository",
]
