"""Song schemas for API request/response models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from songlib.domain.catalog.entities import Song
from songlib.domain.catalog.value_objects import SongDetail, VersePage


class SongResponse(BaseModel):
    """Response schema for a stored song."""

    id: int = Field(description="Song identifier")
    group: str = Field(description="Performing group")
    song: str = Field(description="Song title")
    release_date: Optional[date] = Field(
        None, description="Release date (YYYY-MM-DD), null until resolved"
    )
    text: str = Field(description="Lyrics, verses separated by a blank line")
    link: str = Field(description="Link to the song")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "group": "Muse",
                "song": "Supermassive Black Hole",
                "release_date": "2006-07-16",
                "text": "Ooh baby, don't you know I suffer?\n...",
                "link": "https://www.youtube.com/watch?v=Xsp3_a-PMTw",
                "created_at": "2024-01-01T00:00:00+00:00",
                "updated_at": "2024-01-01T00:00:00+00:00",
            }
        }
    )

    @classmethod
    def from_domain(cls, song: Song) -> SongResponse:
        return cls(
            id=song.id,
            group=song.group,
            song=song.song,
            release_date=song.release_date,
            text=song.text,
            link=song.link,
            created_at=song.created_at,
            updated_at=song.updated_at,
        )


class SongDetailResponse(BaseModel):
    """Response for ``GET /info``.

    May differ from the stored record when an enrichment override applies.
    """

    release_date: Optional[str] = Field(None, description="Release date")
    text: str = Field(description="Lyrics")
    link: str = Field(description="Link to the song")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "release_date": "2006-07-16",
                "text": "Ooh baby, don't you know I suffer?\n...",
                "link": "https://www.youtube.com/watch?v=Xsp3_a-PMTw",
            }
        }
    )

    @classmethod
    def from_domain(cls, detail: SongDetail) -> SongDetailResponse:
        return cls(
            release_date=detail.release_date,
            text=detail.text,
            link=detail.link,
        )


class VersePageResponse(BaseModel):
    """One page of a song's verses."""

    song_id: int
    page: int
    limit: int
    total: int = Field(description="Number of verses in the song")
    verses: list[str]
    total_pages: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "song_id": 1,
                "page": 1,
                "limit": 1,
                "total": 2,
                "verses": ["Ooh baby, don't you know I suffer?\n..."],
                "total_pages": 2,
            }
        }
    )

    @classmethod
    def from_domain(cls, verse_page: VersePage) -> VersePageResponse:
        return cls(
            song_id=verse_page.song_id,
            page=verse_page.page,
            limit=verse_page.limit,
            total=verse_page.total,
            verses=verse_page.verses,
            total_pages=verse_page.total_pages,
        )


class SongCreateRequest(BaseModel):
    """Request to add a song to the catalog (no enrichment)."""

    group: str = Field(..., min_length=1, max_length=255)
    song: str = Field(..., min_length=1, max_length=255)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"group": "Muse", "song": "Supermassive Black Hole"}
        }
    )


class SongUpdateRequest(BaseModel):
    """Request to replace all editable fields of a song."""

    group: str = Field(..., min_length=1, max_length=255)
    song: str = Field(..., min_length=1, max_length=255)
    release_date: Optional[date] = None
    text: str = ""
    link: str = Field(default="", max_length=2048)

    model_config = ConfigDict(extra="forbid")


class SongPatchRequest(BaseModel):
    """Request to overwrite some fields of a song.

    Only the fields present in the body are applied; unknown fields are
    rejected.
    """

    group: Optional[str] = Field(None, min_length=1, max_length=255)
    song: Optional[str] = Field(None, min_length=1, max_length=255)
    release_date: Optional[date] = None
    text: Optional[str] = None
    link: Optional[str] = Field(None, max_length=2048)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"link": "https://example.com/new-link"}},
    )


class SongDeleteResponse(BaseModel):
    id: int
    status: str = "deleted"
