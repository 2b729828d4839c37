"""Criteria for listing songs."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class SongFilter:
    """Optional per-field criteria, combined with AND.

    ``group``, ``song``, ``text`` and ``link`` match as case-insensitive
    substrings; ``release_date`` matches exactly. Empty strings impose no
    constraint.
    """

    group: Optional[str] = None
    song: Optional[str] = None
    release_date: Optional[str] = None
    text: Optional[str] = None
    link: Optional[str] = None

    def __post_init__(self) -> None:
        for field in fields(self):
            if getattr(self, field.name) == "":
                object.__setattr__(self, field.name, None)

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, field.name) is None for field in fields(self))
