"""Application layer ports (aka interfaces)."""

from songlib.application.ports.song_info import (
    EnrichmentOverrideSource,
    SongInfoProvider,
)

__all__ = [
    "EnrichmentOverrideSource",
    "SongInfoProvider",
]
