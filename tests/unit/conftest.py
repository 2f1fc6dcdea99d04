import random
from unittest import mock

import pytest

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.entities.music import Playlist
from playlister.domain.entities.music import Song
from playlister.domain.ports.repositories.playlists import PlaylistRepository
from playlister.domain.ports.scanner import MusicScannerPort

from tests.unit.factories.entities.music import PlaylistFactory
from tests.unit.factories.entities.music import SongFactory

# --- Port Mocks ---


@pytest.fixture
def mock_playlist_repository() -> mock.AsyncMock:
    return mock.AsyncMock(spec=PlaylistRepository, load_playlists=mock.AsyncMock(return_value=[]))


@pytest.fixture
def mock_music_scanner() -> mock.AsyncMock:
    return mock.AsyncMock(spec=MusicScannerPort)


# --- Entity Mocks ---


@pytest.fixture
def song(request: pytest.FixtureRequest) -> Song:
    return SongFactory.build(**getattr(request, "param", {}))


@pytest.fixture
def playlist(request: pytest.FixtureRequest) -> Playlist:
    return PlaylistFactory.build(**getattr(request, "param", {}))


# --- Services ---


@pytest.fixture
def playlist_manager(mock_playlist_repository: mock.AsyncMock) -> PlaylistManager:
    return PlaylistManager(playlist_repository=mock_playlist_repository, rng=random.Random(42))
