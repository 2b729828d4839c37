"""Catalog value objects."""

from songlib.domain.catalog.value_objects.enrichment_override import (
    EnrichmentOverride,
)
from songlib.domain.catalog.value_objects.page_request import (
    DEFAULT_LIST_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_VERSE_LIMIT,
    MAX_SQL_INTEGER,
    PageRequest,
)
from songlib.domain.catalog.value_objects.release_date import (
    RELEASE_DATE_FORMAT,
    format_release_date,
    parse_release_date,
)
from songlib.domain.catalog.value_objects.song_detail import SongDetail
from songlib.domain.catalog.value_objects.song_filter import SongFilter
from songlib.domain.catalog.value_objects.verse_page import VersePage

__all__ = [
    "DEFAULT_LIST_LIMIT",
    "DEFAULT_PAGE",
    "DEFAULT_VERSE_LIMIT",
    "EnrichmentOverride",
    "MAX_SQL_INTEGER",
    "PageRequest",
    "RELEASE_DATE_FORMAT",
    "SongDetail",
    "SongFilter",
    "VersePage",
    "format_release_date",
    "parse_release_date",
]
