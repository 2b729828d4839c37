"""Catalog domain: songs, their metadata and verse paging."""

from songlib.domain.catalog.entities import EDITABLE_FIELDS, Song
from songlib.domain.catalog.exceptions import (
    DuplicateSongError,
    InvalidDateFormatError,
    SongNotFoundError,
    StorageFailureError,
    UpstreamMalformedError,
    UpstreamUnavailableError,
    VersePageNotFoundError,
)
from songlib.domain.catalog.repositories import SongRepository
from songlib.domain.catalog.services import VerseParagraphPaginator, split_verses
from songlib.domain.catalog.value_objects import (
    EnrichmentOverride,
    PageRequest,
    SongDetail,
    SongFilter,
    VersePage,
)

__all__ = [
    # Entities
    "EDITABLE_FIELDS",
    "Song",
    # Exceptions
    "DuplicateSongError",
    "InvalidDateFormatError",
    "SongNotFoundError",
    "StorageFailureError",
    "UpstreamMalformedError",
    "UpstreamUnavailableError",
    "VersePageNotFoundError",
    # Repositories
    "SongRepository",
    # Services
    "VerseParagraphPaginator",
    "split_verses",
    # Value Objects
    "EnrichmentOverride",
    "PageRequest",
    "SongDetail",
    "SongFilter",
    "VersePage",
]
