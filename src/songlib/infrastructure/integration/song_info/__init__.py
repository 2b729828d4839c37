"""Adapters for the upstream song info service and local overrides."""

from songlib.infrastructure.integration.song_info.client import SongInfoClient
from songlib.infrastructure.integration.song_info.override_file import (
    EnrichmentOverrideFile,
)
from songlib.infrastructure.integration.song_info.schemas import (
    EnrichmentFileEntry,
    SongInfoPayload,
)

__all__ = [
    "EnrichmentFileEntry",
    "EnrichmentOverrideFile",
    "SongInfoClient",
    "SongInfoPayload",
]
