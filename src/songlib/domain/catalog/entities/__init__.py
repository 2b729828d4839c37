"""Catalog entities."""

from songlib.domain.catalog.entities.song import EDITABLE_FIELDS, Song

__all__ = [
    "EDITABLE_FIELDS",
    "Song",
]
