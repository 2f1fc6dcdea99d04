import logging
from pathlib import Path
from unittest import mock

from fastapi import FastAPI

import pytest

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.exceptions import StorageError
from playlister.infrastructure.adapters.storage.json_file import JsonPlaylistRepository
from playlister.infrastructure.entrypoints.api.main import lifespan

from tests.unit.factories.entities.music import PlaylistFactory


class TestLifespan:
    TARGET_PATH = "playlister.infrastructure.entrypoints.api.main"

    async def test__loads_playlists(self, mock_api_logger: mock.Mock, data_file: Path) -> None:
        repository = JsonPlaylistRepository(data_file)
        playlists = PlaylistFactory.batch(size=2)
        await repository.save_playlists(playlists)

        app = FastAPI()
        with mock.patch(f"{self.TARGET_PATH}.get_playlist_repository", return_value=repository):
            async with lifespan(app):
                playlist_manager: PlaylistManager = app.state.playlist_manager
                assert await playlist_manager.get_list() == playlists

        mock_api_logger.assert_called_once()

    async def test__load_error(self, mock_api_logger: mock.Mock, caplog: pytest.LogCaptureFixture) -> None:
        repository = mock.AsyncMock(spec=JsonPlaylistRepository)
        repository.load_playlists.side_effect = StorageError("Failed to decode playlists")

        app = FastAPI()
        with (
            mock.patch(f"{self.TARGET_PATH}.get_playlist_repository", return_value=repository),
            caplog.at_level(logging.WARNING),
        ):
            async with lifespan(app):
                assert await app.state.playlist_manager.get_list() == []

        assert "Could not load playlists, starting with an empty collection" in caplog.text
