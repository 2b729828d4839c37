"""SQLAlchemy model for the Song entity."""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import BigInteger, Date, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from songlib.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class SongModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting songs.

    The (group_name, song) pair is unique so that concurrent lookups of an
    unknown song cannot create two rows for it.
    """

    __tablename__ = "songs"

    __table_args__ = (
        UniqueConstraint("group_name", "song", name="uq_songs_group_song"),
    )

    # 64-bit on PostgreSQL; SQLite only autoincrements a plain INTEGER key
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    # Identity within the catalog
    group_name: Mapped[str] = mapped_column(String(255), index=True)
    song: Mapped[str] = mapped_column(String(255), index=True)

    # Metadata
    release_date: Mapped[Optional[date]] = mapped_column(
        Date,
        nullable=True,
        index=True,
    )
    text: Mapped[str] = mapped_column(Text, default="", nullable=False)
    link: Mapped[str] = mapped_column(String(2048), default="", nullable=False)

    def __repr__(self) -> str:
        return (
            f"<SongModel(id={self.id}, "
            f"group_name={self.group_name!r}, "
            f"song={self.song[:30]!r})>"
        )
