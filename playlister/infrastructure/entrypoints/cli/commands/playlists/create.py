from playlister.domain.entities.music import Playlist
from playlister.infrastructure.entrypoints.cli.dependencies import get_playlist_manager


async def playlist_create_logic(name: str, description: str = "") -> Playlist:
    async with get_playlist_manager() as playlist_manager:
        playlist = await playlist_manager.create(name=name, description=description)
        await playlist_manager.save()

    return playlist
