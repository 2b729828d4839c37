"""Song metadata as returned by lookups and enrichment sources."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from songlib.domain.catalog.value_objects.release_date import format_release_date

if TYPE_CHECKING:
    from songlib.domain.catalog.entities import Song
    from songlib.domain.catalog.value_objects.enrichment_override import (
        EnrichmentOverride,
    )


@dataclass(frozen=True)
class SongDetail:
    """Release date, lyric text and link of one song.

    This is a transient view: it is never stored as-is. The release date
    stays a string so that values coming from override files are passed
    through untouched.
    """

    release_date: Optional[str]
    text: str
    link: str

    @classmethod
    def from_song(cls, song: Song) -> SongDetail:
        return cls(
            release_date=format_release_date(song.release_date),
            text=song.text,
            link=song.link,
        )

    def overridden_by(self, override: EnrichmentOverride) -> SongDetail:
        """Return a copy whose fields are replaced by the override's."""
        return replace(
            self,
            release_date=override.release_date,
            text=override.text,
            link=override.link,
        )
