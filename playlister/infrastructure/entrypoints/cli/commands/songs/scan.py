import uuid
from datetime import timedelta
from pathlib import Path

from playlister.application.use_cases.playlist_scan_folder import playlist_scan_folder
from playlister.application.use_cases.song_import_file import song_import_file
from playlister.domain.entities.music import Song
from playlister.infrastructure.entrypoints.cli.dependencies import get_music_scanner
from playlister.infrastructure.entrypoints.cli.dependencies import get_playlist_manager


async def song_scan_logic(playlist_id: uuid.UUID, folder: Path) -> list[Song]:
    async with get_playlist_manager() as playlist_manager:
        songs = await playlist_scan_folder(
            playlist_id=playlist_id,
            root=folder,
            playlist_manager=playlist_manager,
            music_scanner=get_music_scanner(),
        )
        await playlist_manager.save()

    return songs


async def song_import_logic(playlist_id: uuid.UUID, path: Path, duration: timedelta | None = None) -> Song:
    async with get_playlist_manager() as playlist_manager:
        song = await song_import_file(
            playlist_id=playlist_id,
            path=path,
            playlist_manager=playlist_manager,
            music_scanner=get_music_scanner(),
            duration=duration,
        )
        await playlist_manager.save()

    return song
