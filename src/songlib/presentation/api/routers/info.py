"""Info router: song metadata lookup with enrichment."""

import logging

from fastapi import APIRouter, Query

from songlib.application.services import SongEnrichmentService
from songlib.presentation.api.dependencies import RepoFactory
from songlib.presentation.api.schemas import SongDetailResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/info",
    summary="Get song details",
    responses={
        200: {"description": "Release date, lyrics and link of the song"},
        400: {"description": "Missing parameter or invalid upstream date"},
        500: {"description": "Upstream service or storage failure"},
    },
)
async def get_song_info(
    factory: RepoFactory,
    group: str = Query(..., description="Performing group"),
    song: str = Query(..., description="Song title"),
) -> SongDetailResponse:
    """
    Retrieve the details of a song, adding it to the catalog if needed.

    Unknown songs are looked up at the upstream song info service and
    stored. If the local enrichment file has an entry for exactly this
    group and song, its values are returned instead of the stored ones;
    the stored record itself is not changed.
    """
    service = SongEnrichmentService.from_factory(factory)

    try:
        detail = await service.resolve(group, song)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return SongDetailResponse.from_domain(detail)
