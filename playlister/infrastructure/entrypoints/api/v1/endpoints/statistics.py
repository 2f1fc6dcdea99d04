from fastapi import APIRouter
from fastapi import Depends

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.infrastructure.entrypoints.api.dependencies import get_playlist_manager
from playlister.infrastructure.entrypoints.api.schemas import StatisticsResponse

router = APIRouter()


@router.get("", name="statistics")
async def statistics(playlist_manager: PlaylistManager = Depends(get_playlist_manager)) -> StatisticsResponse:
    return StatisticsResponse.model_validate(await playlist_manager.get_statistics())
