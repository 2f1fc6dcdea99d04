import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter
from fastapi import Depends
from fastapi import FastAPI

from playlister import __version__
from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.exceptions import StorageError
from playlister.infrastructure.config.loggers import configure_loggers
from playlister.infrastructure.config.settings.app import app_settings
from playlister.infrastructure.entrypoints.api.dependencies import build_playlist_manager
from playlister.infrastructure.entrypoints.api.dependencies import get_playlist_manager
from playlister.infrastructure.entrypoints.api.dependencies import get_playlist_repository
from playlister.infrastructure.entrypoints.api.schemas import HealthCheckResponse
from playlister.infrastructure.entrypoints.api.v1.endpoints.playlists import router as playlist_router
from playlister.infrastructure.entrypoints.api.v1.endpoints.songs import router as song_router
from playlister.infrastructure.entrypoints.api.v1.endpoints.statistics import router as statistics_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    # Only load configuration loggers at bootstrap, not at import (testing conflicts).
    configure_loggers(level=app_settings.LOG_LEVEL_API, handlers=app_settings.LOG_HANDLERS_API)

    playlist_manager = build_playlist_manager(get_playlist_repository())
    try:
        await playlist_manager.load()
    except StorageError as e:
        logger.warning(f"Could not load playlists, starting with an empty collection: {e}")

    app.state.playlist_manager = playlist_manager
    yield


app = FastAPI(
    title="Playlister API",
    version=__version__,
    lifespan=lifespan,
    debug=app_settings.DEBUG,
)

api_v1_router = APIRouter()
api_v1_router.include_router(playlist_router, prefix="/playlists", tags=["playlists"])
api_v1_router.include_router(song_router, tags=["songs"])
api_v1_router.include_router(statistics_router, prefix="/statistics", tags=["statistics"])

app.include_router(api_v1_router, prefix=app_settings.API_V1_PREFIX)


@app.get("/health", name="health_check", tags=["health"])
async def health_check(playlist_manager: PlaylistManager = Depends(get_playlist_manager)) -> HealthCheckResponse:
    """Health check endpoint reporting the number of playlists in memory."""
    playlists = await playlist_manager.get_list()
    return HealthCheckResponse(status="healthy", playlists=len(playlists))
