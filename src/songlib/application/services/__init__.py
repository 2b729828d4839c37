"""Application layer services."""

from songlib.application.services.song_enrichment_service import (
    SongEnrichmentService,
)

__all__ = [
    "SongEnrichmentService",
]
