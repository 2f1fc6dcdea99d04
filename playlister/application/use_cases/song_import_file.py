import uuid
from datetime import timedelta
from pathlib import Path

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.entities.music import Song
from playlister.domain.ports.scanner import MusicScannerPort


async def song_import_file(
    playlist_id: uuid.UUID,
    path: Path,
    playlist_manager: PlaylistManager,
    music_scanner: MusicScannerPort,
    duration: timedelta | None = None,
) -> Song:
    """Builds a song from an audio file and appends it to a playlist.

    Raises:
        PlaylistNotFound: If no playlist has this ID.
        MusicScanError: If the file cannot be read.
    """
    playlist = await playlist_manager.get(playlist_id)

    song = await music_scanner.read_song(path, duration=duration)
    await playlist_manager.add_song(playlist.id, song)

    return song
