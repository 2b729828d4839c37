"""Operator-provided metadata that patches lookup responses."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnrichmentOverride:
    """One entry of the local enrichment file.

    An override is keyed by the exact (group, song) pair and replaces the
    release date, text and link of the response for that pair.
    """

    group: str
    song: str
    release_date: str
    text: str
    link: str

    def matches(self, group: str, song: str) -> bool:
        return self.group == group and self.song == song
