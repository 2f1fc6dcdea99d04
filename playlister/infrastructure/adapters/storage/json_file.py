import asyncio
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from playlister.domain.entities.music import Playlist
from playlister.domain.exceptions import StorageError
from playlister.domain.ports.repositories.playlists import PlaylistRepository
from playlister.infrastructure.adapters.storage.mappers import to_domain_playlist
from playlister.infrastructure.adapters.storage.mappers import to_playlist_record
from playlister.infrastructure.adapters.storage.schemas import PlaylistRecordList

logger = logging.getLogger(__name__)


class JsonPlaylistRepository(PlaylistRepository):
    """Stores the playlist collection as a single pretty-printed JSON file.

    Songs are embedded in their playlist. Writes go through a temporary sibling
    file which then replaces the target, so a failed save never leaves a
    truncated file behind. File I/O runs in a worker thread.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    async def load_playlists(self) -> list[Playlist]:
        return await asyncio.to_thread(self._read)

    async def save_playlists(self, playlists: Sequence[Playlist]) -> None:
        records = [to_playlist_record(playlist) for playlist in playlists]
        data = PlaylistRecordList.dump_json(records, indent=2, by_alias=True)

        await asyncio.to_thread(self._write, data)

    def _read(self) -> list[Playlist]:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            logger.info(f"No playlists file found at {self.path}, starting empty")
            return []
        except OSError as e:
            raise StorageError(f"Failed to read file {self.path}: {e}") from e

        try:
            records = PlaylistRecordList.validate_json(data)
        except ValidationError as e:
            raise StorageError(f"Failed to decode playlists from {self.path}: {e}") from e

        return [to_domain_playlist(record) for record in records]

    def _write(self, data: bytes) -> None:
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Failed to write file {self.path}: {e}") from e
