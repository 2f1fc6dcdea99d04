import logging

from fastapi import HTTPException
from fastapi import status

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


async def persist(playlist_manager: PlaylistManager) -> None:
    """Saves the collection after a mutation.

    A failure does not roll back the mutation, it is only reported to the client.
    """
    try:
        await playlist_manager.save()
    except StorageError as e:
        logger.error(f"Failed to save playlists: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save: {e}",
        ) from e
