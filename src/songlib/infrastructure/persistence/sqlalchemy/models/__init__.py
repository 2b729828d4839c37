"""SQLAlchemy models for persistence."""

from songlib.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from songlib.infrastructure.persistence.sqlalchemy.models.catalog import SongModel

__all__ = [
    "Base",
    "SongModel",
    "TimestampMixin",
]
