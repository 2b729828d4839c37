"""Song entity: one record of the catalog."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional

from songlib.domain.catalog.value_objects.release_date import parse_release_date
from songlib.domain.shared.exceptions import ValidationError
from songlib.domain.shared.time import utc_now

EDITABLE_FIELDS = frozenset({"group", "song", "release_date", "text", "link"})


class Song:
    """
    A song in the catalog, identified by its (group, song) pair.

    The numeric ID is assigned by the store; a freshly constructed song has
    ``id is None`` until it has been persisted. Release date stays ``None``
    until it is resolved from an enrichment source or set by an update.
    """

    def __init__(
        self,
        group: str,
        song: str,
        release_date: Optional[date] = None,
        text: str = "",
        link: str = "",
    ):
        self._id: Optional[int] = None
        self._group = group
        self._song = song
        self._release_date = release_date
        self._text = text or ""
        self._link = link or ""
        self._created_at = utc_now()
        self._updated_at = utc_now()

        self._validate()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def group(self) -> str:
        return self._group

    @property
    def song(self) -> str:
        return self._song

    @property
    def release_date(self) -> Optional[date]:
        return self._release_date

    @property
    def text(self) -> str:
        return self._text

    @property
    def link(self) -> str:
        return self._link

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def _validate(self) -> None:
        if not self._group or not self._group.strip():
            msg = "Group cannot be empty"
            raise ValidationError(msg, details={"field": "group"})

        if not self._song or not self._song.strip():
            msg = "Song cannot be empty"
            raise ValidationError(msg, details={"field": "song"})

    def replace_details(
        self,
        group: str,
        song: str,
        release_date: Optional[date],
        text: str,
        link: str,
    ) -> None:
        """Overwrite every editable field (full update)."""
        self.apply_changes(
            {
                "group": group,
                "song": song,
                "release_date": release_date,
                "text": text,
                "link": link,
            },
        )

    def apply_changes(self, changes: Mapping[str, Any]) -> None:
        """Overwrite the given fields (partial update).

        Keys must belong to EDITABLE_FIELDS; nothing is applied if any key
        is unknown. ``release_date`` accepts a date, an ISO string or None.
        """
        unknown = sorted(set(changes) - EDITABLE_FIELDS)
        if unknown:
            msg = f"Unknown song fields: {', '.join(unknown)}"
            raise ValidationError(msg, details={"fields": unknown})

        release_date = self._release_date
        if "release_date" in changes:
            release_date = _coerce_release_date(changes["release_date"])

        previous = (self._group, self._song, self._release_date, self._text, self._link)

        if "group" in changes:
            self._group = changes["group"]
        if "song" in changes:
            self._song = changes["song"]
        self._release_date = release_date
        if "text" in changes:
            self._text = changes["text"] or ""
        if "link" in changes:
            self._link = changes["link"] or ""

        try:
            self._validate()
        except ValidationError:
            (
                self._group,
                self._song,
                self._release_date,
                self._text,
                self._link,
            ) = previous
            raise

        self._updated_at = utc_now()

    def __repr__(self) -> str:
        return f"<Song(id={self._id}, group={self._group!r}, song={self._song!r})>"


def _coerce_release_date(value: Any) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    return parse_release_date(value)
