import logging
import uuid
from pathlib import Path

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.entities.music import Song
from playlister.domain.ports.scanner import MusicScannerPort

logger = logging.getLogger(__name__)


async def playlist_scan_folder(
    playlist_id: uuid.UUID,
    root: Path,
    playlist_manager: PlaylistManager,
    music_scanner: MusicScannerPort,
) -> list[Song]:
    """Scans a music folder and appends every song found to a playlist.

    The playlist is checked first so that a wrong ID does not trigger a full scan.
    Persisting the result is left to the caller.

    Args:
        playlist_id: The ID of the playlist receiving the songs.
        root: The folder to scan recursively.
        playlist_manager: The manager owning the playlist.
        music_scanner: The scanner building songs from audio files.

    Returns:
        The songs appended to the playlist.

    Raises:
        PlaylistNotFound: If no playlist has this ID.
        MusicScanError: If the folder is invalid or contains no song.
    """
    playlist = await playlist_manager.get(playlist_id)

    songs = await music_scanner.scan(root)
    await playlist_manager.add_songs(playlist.id, songs)

    logger.info(f"{len(songs)} songs scanned from {root} into playlist {playlist.name}")
    return songs
