"""FastAPI application for the song catalog.

Endpoints are served at the root (``/info``, ``/songs``, ``/song/{id}``)
because existing clients call them there. ``uvicorn`` can load either the
module-level ``app`` or the ``create_app`` factory.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from songlib.presentation.api.dependencies import (
    create_tables,
    get_engine,
    get_song_info_client,
)
from songlib.presentation.api.exception_handlers import setup_exception_handlers
from songlib.presentation.api.routers import info_router, songs_router
from songlib_config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that log every request or statement at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Send log records to stdout at the configured level (runs once)."""
    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("songlib").setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

OPENAPI_TAGS = [
    {
        "name": "Info",
        "description": """Song metadata lookup.

**Resolution order:**
1. Stored song with the exact group and title
2. Upstream song info service (result is stored)
3. Local enrichment file entry (overrides the *response* only)
""",
    },
    {
        "name": "Songs",
        "description": """Song catalog management.

**Listing:**
- Filter by group, song, text or link (case-insensitive substring)
- Filter by exact release date (YYYY-MM-DD)
- `page` / `limit` pagination (defaults 1 / 10)

**Verses:**
- Lyrics are split into verses on blank lines
- `page` / `limit` pagination (defaults 1 / 1)
""",
    },
    {
        "name": "Health",
        "description": "Liveness probe.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    logger.info("songlib API v%s starting", API_VERSION)

    try:
        await create_tables()
    except (ConnectionRefusedError, OSError):
        logger.critical(
            "Song store unreachable at startup (%s)", settings.database_type
        )
        raise SystemExit(1) from None

    if settings.external_api_url:
        logger.info("Song info service: %s", settings.external_api_url)
    else:
        logger.warning("EXTERNAL_API_URL not set, unknown songs cannot be looked up")
    logger.info("Enrichment override file: %s", settings.song_enrichment_file)

    yield

    logger.info("songlib API stopping")
    await get_song_info_client().close()
    await get_engine().dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the catalog application.

    Parameters
    ----------
    settings
        Settings to use instead of the cached environment settings.
    """
    _configure_logging()
    settings = settings or get_settings()
    docs_enabled = settings.api_debug

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Song catalog with upstream enrichment and verse paging.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)

    app.include_router(info_router, tags=["Info"])
    app.include_router(songs_router, tags=["Songs"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {"status": "healthy", "version": API_VERSION}

    return app


app = create_app()
