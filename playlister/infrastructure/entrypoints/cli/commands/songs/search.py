from playlister.domain.entities.music import SearchResult
from playlister.infrastructure.entrypoints.cli.dependencies import get_playlist_manager


async def song_search_logic(query: str) -> list[SearchResult]:
    async with get_playlist_manager() as playlist_manager:
        return await playlist_manager.search(query)
