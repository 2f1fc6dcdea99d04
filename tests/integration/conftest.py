from datetime import timedelta
from pathlib import Path

import pytest

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.ports.repositories.playlists import PlaylistRepository
from playlister.domain.ports.scanner import MusicScannerPort
from playlister.infrastructure.adapters.scanner.filesystem import MutagenMusicScanner
from playlister.infrastructure.adapters.storage.json_file import JsonPlaylistRepository

# --- Storage ---


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "playlists.json"


@pytest.fixture
def playlist_repository(data_file: Path) -> PlaylistRepository:
    return JsonPlaylistRepository(data_file)


# --- Scanner ---


@pytest.fixture
def music_scanner() -> MusicScannerPort:
    return MutagenMusicScanner(default_duration=timedelta(seconds=180), max_concurrency=4)


# --- Services ---


@pytest.fixture
def playlist_manager(playlist_repository: PlaylistRepository) -> PlaylistManager:
    return PlaylistManager(playlist_repository=playlist_repository)
