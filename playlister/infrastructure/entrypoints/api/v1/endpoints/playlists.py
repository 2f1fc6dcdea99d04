import uuid
from pathlib import Path

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import status

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.application.use_cases.playlist_scan_folder import playlist_scan_folder
from playlister.domain.exceptions import MusicScanError
from playlister.domain.exceptions import PlaylistNotFound
from playlister.domain.ports.scanner import MusicScannerPort
from playlister.domain.schemas.music import PlaylistCreate
from playlister.infrastructure.entrypoints.api.dependencies import get_music_scanner
from playlister.infrastructure.entrypoints.api.dependencies import get_playlist_manager
from playlister.infrastructure.entrypoints.api.schemas import FolderScanRequest
from playlister.infrastructure.entrypoints.api.schemas import PlaylistResponse
from playlister.infrastructure.entrypoints.api.schemas import SongResponse
from playlister.infrastructure.entrypoints.api.schemas import SuccessResponse
from playlister.infrastructure.entrypoints.api.v1.endpoints._shared import persist

router = APIRouter()


@router.get("", name="playlist_list")
async def playlist_list(
    playlist_manager: PlaylistManager = Depends(get_playlist_manager),
) -> list[PlaylistResponse]:
    playlists = await playlist_manager.get_list()
    return [PlaylistResponse.from_entity(playlist) for playlist in playlists]


@router.post("", name="playlist_create", status_code=status.HTTP_201_CREATED)
async def playlist_create(
    playlist_data: PlaylistCreate,
    playlist_manager: PlaylistManager = Depends(get_playlist_manager),
) -> PlaylistResponse:
    playlist = await playlist_manager.create(name=playlist_data.name, description=playlist_data.description)
    await persist(playlist_manager)

    return PlaylistResponse.from_entity(playlist)


@router.get("/{playlist_id}", name="playlist_detail")
async def playlist_detail(
    playlist_id: uuid.UUID,
    playlist_manager: PlaylistManager = Depends(get_playlist_manager),
) -> PlaylistResponse:
    try:
        playlist = await playlist_manager.get(playlist_id)
    except PlaylistNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return PlaylistResponse.from_entity(playlist)


@router.delete("/{playlist_id}", name="playlist_delete")
async def playlist_delete(
    playlist_id: uuid.UUID,
    playlist_manager: PlaylistManager = Depends(get_playlist_manager),
) -> SuccessResponse:
    try:
        await playlist_manager.delete(playlist_id)
    except PlaylistNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    await persist(playlist_manager)
    return SuccessResponse(message="Playlist deleted successfully")


@router.post("/{playlist_id}/shuffle", name="playlist_shuffle")
async def playlist_shuffle(
    playlist_id: uuid.UUID,
    playlist_manager: PlaylistManager = Depends(get_playlist_manager),
) -> PlaylistResponse:
    try:
        playlist = await playlist_manager.shuffle(playlist_id)
    except PlaylistNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    await persist(playlist_manager)
    return PlaylistResponse.from_entity(playlist)


@router.post("/{playlist_id}/scan", name="playlist_scan", status_code=status.HTTP_201_CREATED)
async def playlist_scan(
    playlist_id: uuid.UUID,
    scan_data: FolderScanRequest,
    playlist_manager: PlaylistManager = Depends(get_playlist_manager),
    music_scanner: MusicScannerPort = Depends(get_music_scanner),
) -> list[SongResponse]:
    try:
        songs = await playlist_scan_folder(
            playlist_id=playlist_id,
            root=Path(scan_data.folder_path),
            playlist_manager=playlist_manager,
            music_scanner=music_scanner,
        )
    except PlaylistNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except MusicScanError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Error scanning folder: {e}") from e

    await persist(playlist_manager)
    return [SongResponse.model_validate(song) for song in songs]
