import uuid

from playlister.domain.entities.music import Playlist
from playlister.infrastructure.entrypoints.cli.dependencies import get_playlist_manager


async def playlist_list_logic() -> list[Playlist]:
    async with get_playlist_manager() as playlist_manager:
        return await playlist_manager.get_list()


async def playlist_show_logic(playlist_id: uuid.UUID) -> Playlist:
    async with get_playlist_manager() as playlist_manager:
        return await playlist_manager.get(playlist_id)
