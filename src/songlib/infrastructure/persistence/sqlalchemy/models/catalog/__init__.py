"""Catalog models."""

from songlib.infrastructure.persistence.sqlalchemy.models.catalog.song_model import (
    SongModel,
)

__all__ = [
    "SongModel",
]
