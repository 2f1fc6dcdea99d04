from collections.abc import AsyncGenerator
from collections.abc import Iterator
from unittest import mock

from httpx import ASGITransport
from httpx import AsyncClient

import pytest

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.ports.scanner import MusicScannerPort
from playlister.infrastructure.entrypoints.api.dependencies import get_music_scanner
from playlister.infrastructure.entrypoints.api.dependencies import get_playlist_manager
from playlister.infrastructure.entrypoints.api.main import app


@pytest.fixture(name="mock_api_logger")
def block_api_logging_reconfiguration() -> Iterator[mock.Mock]:
    """Prevents FastAPI lifespan from overwriting test logging config."""
    with mock.patch("playlister.infrastructure.entrypoints.api.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
def mock_music_scanner() -> mock.AsyncMock:
    return mock.AsyncMock(spec=MusicScannerPort)


@pytest.fixture
async def async_client(
    mock_api_logger: mock.Mock,
    playlist_manager: PlaylistManager,
    request: pytest.FixtureRequest,
) -> AsyncGenerator[AsyncClient]:
    """
    AsyncClient bound to a playlist manager stored in a temporary JSON file.

    Usage:
        # Real filesystem scanner
        async def test_XXX(async_client): ...

        # Mocked scanner (note the order!)
        async def test_XXX(mock_music_scanner, async_client): ...
    """
    app.dependency_overrides[get_playlist_manager] = lambda: playlist_manager

    if "mock_music_scanner" in request.fixturenames:
        mock_scanner = request.getfixturevalue("mock_music_scanner")
        app.dependency_overrides[get_music_scanner] = lambda: mock_scanner

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    # Clean up
    app.dependency_overrides.clear()
