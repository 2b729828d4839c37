"""Catalog repositories."""

from songlib.infrastructure.persistence.sqlalchemy.repositories.catalog.song_repository import (  # NOQA: E501
    SongRepositorySQLAlchemy,
)

__all__ = [
    "SongRepositorySQLAlchemy",
]
