"""SQLAlchemy repository implementations."""

from songlib.infrastructure.persistence.sqlalchemy.repositories.catalog import (
    SongRepositorySQLAlchemy,
)
from songlib.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)

__all__ = [
    "SQLAlchemyRepositoryFactory",
    "SongRepositorySQLAlchemy",
]
