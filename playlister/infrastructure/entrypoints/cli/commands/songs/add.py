import uuid

from playlister.domain.entities.music import Song
from playlister.domain.schemas.music import SongCreate
from playlister.infrastructure.entrypoints.cli.dependencies import get_playlist_manager


async def song_add_logic(playlist_id: uuid.UUID, song_data: SongCreate) -> Song:
    song = song_data.to_song()

    async with get_playlist_manager() as playlist_manager:
        await playlist_manager.add_song(playlist_id, song)
        await playlist_manager.save()

    return song
