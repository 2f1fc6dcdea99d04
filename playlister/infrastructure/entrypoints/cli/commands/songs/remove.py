import uuid

from playlister.domain.exceptions import SongNotFound
from playlister.infrastructure.entrypoints.cli.dependencies import get_playlist_manager


async def song_remove_logic(playlist_id: uuid.UUID, song_id: uuid.UUID) -> None:
    async with get_playlist_manager() as playlist_manager:
        if not await playlist_manager.remove_song(playlist_id, song_id):
            raise SongNotFound(f"Song not found: {song_id}")

        await playlist_manager.save()
