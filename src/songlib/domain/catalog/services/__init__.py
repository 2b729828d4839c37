"""Catalog domain services."""

from songlib.domain.catalog.services.verse_paginator import (
    VERSE_SEPARATOR,
    VerseParagraphPaginator,
    split_verses,
)

__all__ = [
    "VERSE_SEPARATOR",
    "VerseParagraphPaginator",
    "split_verses",
]
