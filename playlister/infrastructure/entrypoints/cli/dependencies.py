import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import timedelta

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.exceptions import StorageError
from playlister.domain.ports.repositories.playlists import PlaylistRepository
from playlister.domain.ports.scanner import MusicScannerPort
from playlister.infrastructure.adapters.scanner.filesystem import MutagenMusicScanner
from playlister.infrastructure.adapters.storage.json_file import JsonPlaylistRepository
from playlister.infrastructure.config.settings.app import app_settings

logger = logging.getLogger(__name__)


def get_playlist_repository() -> PlaylistRepository:
    return JsonPlaylistRepository(app_settings.DATA_FILE)


def get_music_scanner() -> MusicScannerPort:
    return MutagenMusicScanner(
        default_duration=timedelta(seconds=app_settings.SCAN_DEFAULT_DURATION),
        max_concurrency=app_settings.SCAN_MAX_CONCURRENCY,
    )


@asynccontextmanager
async def get_playlist_manager(strict: bool = True) -> AsyncGenerator[PlaylistManager]:
    """Yields a playlist manager loaded from the configured storage.

    Args:
        strict: Whether a load failure is raised. Otherwise it is logged and the
            manager starts with an empty collection.
    """
    playlist_manager = PlaylistManager(
        playlist_repository=get_playlist_repository(),
        search_buffer_size=app_settings.SEARCH_BUFFER_SIZE,
    )

    try:
        await playlist_manager.load()
    except StorageError as e:
        if strict:
            raise
        logger.warning(f"Could not load playlists, starting with an empty collection: {e}")

    yield playlist_manager
