"""Integrations with services outside the catalog."""

from songlib.infrastructure.integration.song_info import (
    EnrichmentOverrideFile,
    SongInfoClient,
)

__all__ = [
    "EnrichmentOverrideFile",
    "SongInfoClient",
]
