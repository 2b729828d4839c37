from songlib.presentation.api.routers.info import router as info_router
from songlib.presentation.api.routers.songs import router as songs_router

__all__ = [
    "info_router",
    "songs_router",
]
