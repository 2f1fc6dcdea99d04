import uuid
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query
from fastapi import status

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.application.use_cases.song_import_file import song_import_file
from playlister.domain.exceptions import MusicScanError
from playlister.domain.exceptions import PlaylistNotFound
from playlister.domain.ports.scanner import MusicScannerPort
from playlister.domain.schemas.music import SongCreate
from playlister.infrastructure.entrypoints.api.dependencies import get_music_scanner
from playlister.infrastructure.entrypoints.api.dependencies import get_playlist_manager
from playlister.infrastructure.entrypoints.api.schemas import SearchResultResponse
from playlister.infrastructure.entrypoints.api.schemas import SongImportRequest
from playlister.infrastructure.entrypoints.api.schemas import SongResponse
from playlister.infrastructure.entrypoints.api.schemas import SuccessResponse
from playlister.infrastructure.entrypoints.api.v1.endpoints._shared import persist

router = APIRouter()


@router.get("/songs/search", name="song_search")
async def song_search(
    q: Annotated[str, Query(min_length=1, description="Matched against title, artist, album and genre")],
    playlist_manager: PlaylistManager = Depends(get_playlist_manager),
) -> list[SearchResultResponse]:
    results = await playlist_manager.search(q)
    return [SearchResultResponse.model_validate(result) for result in results]


@router.post("/playlists/{playlist_id}/songs", name="song_add", status_code=status.HTTP_201_CREATED)
async def song_add(
    playlist_id: uuid.UUID,
    song_data: SongCreate,
    playlist_manager: PlaylistManager = Depends(get_playlist_manager),
) -> SongResponse:
    song = song_data.to_song()

    try:
        await playlist_manager.add_song(playlist_id, song)
    except PlaylistNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    await persist(playlist_manager)
    return SongResponse.model_validate(song)


@router.post("/playlists/{playlist_id}/songs/import", name="song_import", status_code=status.HTTP_201_CREATED)
async def song_import(
    playlist_id: uuid.UUID,
    import_data: SongImportRequest,
    playlist_manager: PlaylistManager = Depends(get_playlist_manager),
    music_scanner: MusicScannerPort = Depends(get_music_scanner),
) -> SongResponse:
    try:
        song = await song_import_file(
            playlist_id=playlist_id,
            path=Path(import_data.file_path),
            playlist_manager=playlist_manager,
            music_scanner=music_scanner,
            duration=import_data.duration,
        )
    except PlaylistNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except MusicScanError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Failed to add song: {e}") from e

    await persist(playlist_manager)
    return SongResponse.model_validate(song)


@router.delete("/playlists/{playlist_id}/songs/{song_id}", name="song_remove")
async def song_remove(
    playlist_id: uuid.UUID,
    song_id: uuid.UUID,
    playlist_manager: PlaylistManager = Depends(get_playlist_manager),
) -> SuccessResponse:
    try:
        removed = await playlist_manager.remove_song(playlist_id, song_id)
    except PlaylistNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Song not found: {song_id}")

    await persist(playlist_manager)
    return SuccessResponse(message="Song removed successfully")
