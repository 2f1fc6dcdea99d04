import uuid

from playlister.domain.entities.music import Playlist
from playlister.infrastructure.entrypoints.cli.dependencies import get_playlist_manager


async def playlist_shuffle_logic(playlist_id: uuid.UUID) -> Playlist:
    async with get_playlist_manager() as playlist_manager:
        playlist = await playlist_manager.shuffle(playlist_id)
        await playlist_manager.save()

    return playlist
