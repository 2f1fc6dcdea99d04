from datetime import timedelta

from fastapi import Request

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.ports.repositories.playlists import PlaylistRepository
from playlister.domain.ports.scanner import MusicScannerPort
from playlister.infrastructure.adapters.scanner.filesystem import MutagenMusicScanner
from playlister.infrastructure.adapters.storage.json_file import JsonPlaylistRepository
from playlister.infrastructure.config.settings.app import app_settings


def get_playlist_repository() -> PlaylistRepository:
    return JsonPlaylistRepository(app_settings.DATA_FILE)


def get_music_scanner() -> MusicScannerPort:
    return MutagenMusicScanner(
        default_duration=timedelta(seconds=app_settings.SCAN_DEFAULT_DURATION),
        max_concurrency=app_settings.SCAN_MAX_CONCURRENCY,
    )


def build_playlist_manager(playlist_repository: PlaylistRepository) -> PlaylistManager:
    return PlaylistManager(
        playlist_repository=playlist_repository,
        search_buffer_size=app_settings.SEARCH_BUFFER_SIZE,
    )


def get_playlist_manager(request: Request) -> PlaylistManager:
    # Built and loaded once by the application lifespan.
    return request.app.state.playlist_manager
