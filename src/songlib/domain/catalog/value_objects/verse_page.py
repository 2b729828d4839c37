"""A slice of a song's verses."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class VersePage:
    """Verses on one page plus the paging metadata."""

    page: int
    limit: int
    total: int
    total_pages: int
    verses: list[str] = field(default_factory=list)
    song_id: Optional[int] = None
