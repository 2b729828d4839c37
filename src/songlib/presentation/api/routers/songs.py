"""Songs router: catalog listing, CRUD and verse pagination."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Path, Query, status

from songlib.application.commands import (
    CreateSongCommand,
    DeleteSongCommand,
    PatchSongCommand,
    UpdateSongCommand,
)
from songlib.application.queries import (
    GetSongQuery,
    GetSongVersesQuery,
    ListSongsQuery,
)
from songlib.domain.catalog.value_objects import MAX_SQL_INTEGER, SongFilter
from songlib.presentation.api.dependencies import RepoFactory
from songlib.presentation.api.schemas import (
    SongCreateRequest,
    SongDeleteResponse,
    SongPatchRequest,
    SongResponse,
    SongUpdateRequest,
    VersePageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Ids outside the id column range are rejected as 400 before any lookup
SongId = Annotated[
    int,
    Path(ge=-MAX_SQL_INTEGER - 1, le=MAX_SQL_INTEGER, description="Song ID"),
]


@router.get(
    "/songs",
    summary="List songs",
    responses={
        200: {"description": "One page of songs matching the filters"},
        400: {"description": "Invalid release_date filter"},
    },
)
async def list_songs(  # NOQA: PLR0913
    factory: RepoFactory,
    group: Optional[str] = Query(None, description="Group contains (any case)"),
    song: Optional[str] = Query(None, description="Title contains (any case)"),
    release_date: Optional[str] = Query(
        None, description="Exact release date (YYYY-MM-DD)"
    ),
    text: Optional[str] = Query(None, description="Lyrics contain (any case)"),
    link: Optional[str] = Query(None, description="Link contains (any case)"),
    page: Optional[str] = Query(None, description="Page number (default 1)"),
    limit: Optional[str] = Query(None, description="Results per page (default 10)"),
) -> list[SongResponse]:
    """
    List songs with optional filtering and pagination.

    All filters combine with AND. Invalid page or limit values fall back to
    the defaults; a page past the last match returns an empty list.
    """
    query = ListSongsQuery.from_factory(factory)
    result = await query.execute(
        criteria=SongFilter(
            group=group,
            song=song,
            release_date=release_date,
            text=text,
            link=link,
        ),
        page=page,
        limit=limit,
    )
    return [SongResponse.from_domain(s) for s in result.songs]


@router.post(
    "/songs",
    status_code=status.HTTP_201_CREATED,
    summary="Create a song",
    responses={
        201: {"description": "Song created"},
        400: {"description": "Invalid input"},
        409: {"description": "Song already exists"},
    },
)
async def create_song(
    request: SongCreateRequest,
    factory: RepoFactory,
) -> SongResponse:
    """Add a song to the catalog without looking up its details."""
    command = CreateSongCommand.from_factory(factory)

    try:
        created = await command.execute(group=request.group, song=request.song)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return SongResponse.from_domain(created)


@router.get(
    "/song/{song_id}",
    summary="Get a song",
    responses={
        200: {"description": "The song"},
        400: {"description": "Invalid song ID"},
        404: {"description": "Song not found"},
    },
)
async def get_song(song_id: SongId, factory: RepoFactory) -> SongResponse:
    query = GetSongQuery.from_factory(factory)
    return SongResponse.from_domain(await query.execute(song_id))


@router.get(
    "/song/{song_id}/verses",
    summary="Get song verses with pagination",
    responses={
        200: {"description": "One page of verses"},
        400: {"description": "Invalid song ID"},
        404: {"description": "Song not found or page out of range"},
    },
)
async def get_song_verses(
    song_id: SongId,
    factory: RepoFactory,
    page: Optional[str] = Query(None, description="Page number (default 1)"),
    limit: Optional[str] = Query(None, description="Verses per page (default 1)"),
) -> VersePageResponse:
    """
    Retrieve the lyrics of a song one page of verses at a time.

    Verses are separated by a blank line. Invalid page or limit values fall
    back to page 1 with one verse per page.
    """
    query = GetSongVersesQuery.from_factory(factory)
    verse_page = await query.execute(song_id, page=page, limit=limit)
    return VersePageResponse.from_domain(verse_page)


@router.put(
    "/song/{song_id}",
    summary="Update a song",
    responses={
        200: {"description": "Song updated"},
        400: {"description": "Invalid input"},
        404: {"description": "Song not found"},
        409: {"description": "Another song has this group and title"},
    },
)
async def update_song(
    song_id: SongId,
    request: SongUpdateRequest,
    factory: RepoFactory,
) -> SongResponse:
    """Replace all fields of a song. Omitted optional fields are cleared."""
    command = UpdateSongCommand.from_factory(factory)

    try:
        updated = await command.execute(
            song_id=song_id,
            group=request.group,
            song=request.song,
            release_date=request.release_date,
            text=request.text,
            link=request.link,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return SongResponse.from_domain(updated)


@router.patch(
    "/song/{song_id}",
    summary="Partially update a song",
    responses={
        200: {"description": "Song updated"},
        400: {"description": "Invalid input or unknown field"},
        404: {"description": "Song not found"},
        409: {"description": "Another song has this group and title"},
    },
)
async def patch_song(
    song_id: SongId,
    request: SongPatchRequest,
    factory: RepoFactory,
) -> SongResponse:
    """Update one or more fields of a song; other fields keep their values."""
    command = PatchSongCommand.from_factory(factory)

    try:
        updated = await command.execute(
            song_id=song_id,
            changes=request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return SongResponse.from_domain(updated)


@router.delete(
    "/song/{song_id}",
    summary="Delete a song",
    responses={
        200: {"description": "Song deleted"},
        400: {"description": "Invalid song ID"},
        404: {"description": "Song not found"},
    },
)
async def delete_song(song_id: SongId, factory: RepoFactory) -> SongDeleteResponse:
    command = DeleteSongCommand.from_factory(factory)

    try:
        await command.execute(song_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return SongDeleteResponse(id=song_id)
