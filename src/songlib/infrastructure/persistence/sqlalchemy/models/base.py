"""Declarative base and shared columns for the song store tables.

``Base.metadata`` is what ``songlib init-db`` and the API lifespan create
(or, with ``--reset``, drop and recreate).
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from songlib.domain.shared.time import utc_now


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """Adds ``created_at`` and ``updated_at`` columns, stored in UTC.

    ``updated_at`` is refreshed by SQLAlchemy on every ORM update of the row.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )
