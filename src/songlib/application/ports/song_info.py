"""Ports for song metadata sources outside the catalog."""

from abc import ABC, abstractmethod
from typing import Optional

from songlib.domain.catalog.value_objects import EnrichmentOverride, SongDetail


class SongInfoProvider(ABC):
    """Authoritative lookup of song metadata (the upstream info service)."""

    @abstractmethod
    async def fetch_song_detail(self, group: str, song: str) -> SongDetail:
        """
        Fetch release date, text and link for a song.

        Raises
        ------
        UpstreamUnavailableError
            If the service cannot be reached, times out or answers non-200
        UpstreamMalformedError
            If the response body cannot be interpreted
        """


class EnrichmentOverrideSource(ABC):
    """Best-effort source of operator overrides for lookup responses."""

    @abstractmethod
    async def find(self, group: str, song: str) -> Optional[EnrichmentOverride]:
        """
        Find the override for an exact (group, song) pair.

        Implementations must not raise: an unavailable or unreadable
        source behaves like a source without a matching entry.
        """
