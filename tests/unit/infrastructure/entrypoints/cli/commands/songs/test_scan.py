import uuid
from collections.abc import Iterable
from datetime import timedelta
from pathlib import Path
from unittest import mock

import pytest
from typer.testing import CliRunner

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.entities.music import Song
from playlister.domain.exceptions import MusicScanError
from playlister.infrastructure.entrypoints.cli.commands.songs.scan import song_import_logic
from playlister.infrastructure.entrypoints.cli.commands.songs.scan import song_scan_logic
from playlister.infrastructure.entrypoints.cli.main import app

from tests.unit.factories.entities.music import SongFactory


class TestSongScanLogic:
    TARGET_PATH = "playlister.infrastructure.entrypoints.cli.commands.songs.scan"

    async def test__scan(
        self,
        mock_get_playlist_manager: PlaylistManager,
        mock_get_music_scanner: mock.AsyncMock,
        mock_playlist_repository: mock.AsyncMock,
    ) -> None:
        playlist = await mock_get_playlist_manager.create("Scanned")
        songs = SongFactory.batch(size=2)
        mock_get_music_scanner.scan.return_value = songs

        assert await song_scan_logic(playlist.id, Path("/music")) == songs

        assert playlist.songs == songs
        mock_playlist_repository.save_playlists.assert_awaited_once()

    async def test__scan__error(
        self,
        mock_get_playlist_manager: PlaylistManager,
        mock_get_music_scanner: mock.AsyncMock,
        mock_playlist_repository: mock.AsyncMock,
    ) -> None:
        playlist = await mock_get_playlist_manager.create("Scanned")
        mock_get_music_scanner.scan.side_effect = MusicScanError("No songs found")

        with pytest.raises(MusicScanError):
            await song_scan_logic(playlist.id, Path("/music"))

        mock_playlist_repository.save_playlists.assert_not_awaited()

    async def test__import(
        self,
        mock_get_playlist_manager: PlaylistManager,
        mock_get_music_scanner: mock.AsyncMock,
        song: Song,
    ) -> None:
        playlist = await mock_get_playlist_manager.create("Imported")
        mock_get_music_scanner.read_song.return_value = song

        assert await song_import_logic(playlist.id, Path("/music/a.mp3"), duration=timedelta(minutes=1)) is song

        assert playlist.songs == [song]
        mock_get_music_scanner.read_song.assert_awaited_once_with(Path("/music/a.mp3"), duration=timedelta(minutes=1))


class TestSongScanCommand:
    @pytest.fixture
    def mock_song_scan_logic(self) -> Iterable[mock.AsyncMock]:
        target_path = "playlister.infrastructure.entrypoints.cli.commands.songs.song_scan_logic"
        with mock.patch(target_path, new_callable=mock.AsyncMock) as patched:
            yield patched

    def test__nominal(self, runner: CliRunner, mock_song_scan_logic: mock.AsyncMock) -> None:
        songs = SongFactory.batch(size=2)
        mock_song_scan_logic.return_value = songs
        playlist_id = uuid.uuid4()

        result = runner.invoke(app, ["songs", "scan", str(playlist_id), "/music"])

        assert result.exit_code == 0
        assert "2 songs added." in result.output
        assert f"- [{songs[1].id}]" in result.output
        mock_song_scan_logic.assert_awaited_once_with(playlist_id, Path("/music"))

    def test__error(self, runner: CliRunner, mock_song_scan_logic: mock.AsyncMock) -> None:
        mock_song_scan_logic.side_effect = MusicScanError("Provided path is not a directory: /music")

        result = runner.invoke(app, ["songs", "scan", str(uuid.uuid4()), "/music"])

        assert result.exit_code == 1
        assert "Error: Provided path is not a directory: /music" in result.output


class TestSongImportCommand:
    @pytest.fixture
    def mock_song_import_logic(self) -> Iterable[mock.AsyncMock]:
        target_path = "playlister.infrastructure.entrypoints.cli.commands.songs.song_import_logic"
        with mock.patch(target_path, new_callable=mock.AsyncMock) as patched:
            yield patched

    def test__nominal(self, runner: CliRunner, mock_song_import_logic: mock.AsyncMock, song: Song) -> None:
        mock_song_import_logic.return_value = song
        playlist_id = uuid.uuid4()

        result = runner.invoke(app, ["songs", "import", str(playlist_id), "/music/a.mp3", "--duration", "3:05"])

        assert result.exit_code == 0
        assert f"Added song: [{song.id}]" in result.output
        mock_song_import_logic.assert_awaited_once_with(
            playlist_id,
            Path("/music/a.mp3"),
            duration=timedelta(minutes=3, seconds=5),
        )

    def test__duration__omitted(self, runner: CliRunner, mock_song_import_logic: mock.AsyncMock, song: Song) -> None:
        mock_song_import_logic.return_value = song

        result = runner.invoke(app, ["songs", "import", str(uuid.uuid4()), "/music/a.mp3"])

        assert result.exit_code == 0
        assert mock_song_import_logic.await_args.kwargs["duration"] is None
