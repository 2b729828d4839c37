"""Stand-in for the upstream song info service.

Serves ``GET /info`` from the local enrichment file so the catalog can be
run end to end without the real service::

    songlib serve-upstream
    EXTERNAL_API_URL=http://localhost:5051 songlib serve
"""

import logging

from fastapi import FastAPI, HTTPException, Query, status

from songlib.infrastructure.integration.song_info import (
    EnrichmentOverrideFile,
    SongInfoPayload,
)
from songlib_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_upstream_app(settings: Settings | None = None) -> FastAPI:
    """Create the stand-in upstream application."""
    if settings is None:
        settings = get_settings()

    source = EnrichmentOverrideFile(settings.song_enrichment_file)

    app = FastAPI(
        title="Song Info Service (stand-in)",
        description="Answers song info lookups from the local enrichment file.",
        version="1.0.0",
    )

    @app.get("/info")
    async def get_info(
        group: str | None = Query(None),
        song: str | None = Query(None),
    ) -> SongInfoPayload:
        if not group or not song:
            logger.debug("Missing request parameters: group or song")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="missing parameters",
            )

        entry = await source.find(group, song)
        if entry is None:
            logger.debug("No enrichment entry for %s - %s", group, song)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="song not found",
            )

        logger.info("Request to /info succeeded for %s - %s", group, song)
        return SongInfoPayload(
            release_date=entry.release_date,
            text=entry.text,
            link=entry.link,
        )

    @app.get("/health")
    async def health_check() -> dict:
        return {"status": "ok", "source": str(source.path)}

    return app
