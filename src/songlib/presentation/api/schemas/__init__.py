"""API request/response schemas."""

from songlib.presentation.api.schemas.songs import (
    SongCreateRequest,
    SongDeleteResponse,
    SongDetailResponse,
    SongPatchRequest,
    SongResponse,
    SongUpdateRequest,
    VersePageResponse,
)

__all__ = [
    "SongCreateRequest",
    "SongDeleteResponse",
    "SongDetailResponse",
    "SongPatchRequest",
    "SongResponse",
    "SongUpdateRequest",
    "VersePageResponse",
]
