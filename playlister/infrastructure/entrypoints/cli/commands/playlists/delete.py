import uuid

from playlister.infrastructure.entrypoints.cli.dependencies import get_playlist_manager


async def playlist_delete_logic(playlist_id: uuid.UUID) -> None:
    async with get_playlist_manager() as playlist_manager:
        await playlist_manager.delete(playlist_id)
        await playlist_manager.save()
