import asyncio
import contextlib
import logging
import random
import uuid
from collections import Counter
from collections.abc import Iterable
from datetime import timedelta
from typing import Final

from playlister.application.services.locks import ReadWriteLock
from playlister.domain.entities.music import Playlist
from playlister.domain.entities.music import SearchResult
from playlister.domain.entities.music import Song
from playlister.domain.entities.music import Statistics
from playlister.domain.exceptions import PlaylistNotFound
from playlister.domain.ports.repositories.playlists import PlaylistRepository

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_BUFFER_SIZE: Final[int] = 100


def song_matches(song: Song, query: str) -> bool:
    """Tells whether the lower-cased query is contained in any searchable field of the song."""
    return any(query in value.lower() for value in (song.title, song.artist, song.album, song.genre))


class PlaylistManager:
    """Owns the authoritative, ordered collection of playlists.

    Structural mutations (create, delete, load) and song-level mutations take
    the exclusive lock, while reads (get, list, search, statistics) and save
    share it.

    Playlists returned by `get` and `get_list` are the managed instances
    themselves: mutating them directly bypasses the lock. Prefer `add_song`,
    `add_songs`, `remove_song` and `shuffle`, which go through it.

    Persistence is explicit: the manager never saves on its own, callers invoke
    `save` after the mutations they want persisted.
    """

    def __init__(
        self,
        playlist_repository: PlaylistRepository,
        rng: random.Random | None = None,
        search_buffer_size: int = DEFAULT_SEARCH_BUFFER_SIZE,
    ) -> None:
        self.playlist_repository = playlist_repository
        self.rng = rng
        self.search_buffer_size = search_buffer_size

        self._playlists: list[Playlist] = []
        self._lock = ReadWriteLock()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    async def load(self) -> None:
        """Replaces the whole in-memory collection with the persisted one.

        Raises:
            StorageError: If the repository fails. The in-memory collection is
                then left untouched.
        """
        async with self._lock.write():
            playlists = await self.playlist_repository.load_playlists()
            self._playlists = list(playlists)

        logger.info(f"Loaded {len(playlists)} playlists")

    async def save(self) -> None:
        """Persists the current collection.

        Raises:
            StorageError: If the repository fails. In-memory state is kept as is.
        """
        async with self._lock.read():
            await self.playlist_repository.save_playlists(list(self._playlists))
            count = len(self._playlists)

        logger.debug(f"Saved {count} playlists")

    # -------------------------------------------------------------------------
    # Playlists
    # -------------------------------------------------------------------------

    async def create(self, name: str, description: str = "") -> Playlist:
        playlist = Playlist(name=name, description=description)

        async with self._lock.write():
            self._playlists.append(playlist)

        logger.info(f"Playlist created: {playlist.name} ({playlist.id})")
        return playlist

    async def get(self, playlist_id: uuid.UUID) -> Playlist:
        """Retrieves a playlist by its ID.

        Raises:
            PlaylistNotFound: If no playlist has this ID.
        """
        async with self._lock.read():
            return self._find(playlist_id)

    async def get_list(self) -> list[Playlist]:
        """Returns the playlists in creation order.

        The returned list is a copy, but its items are the managed playlists.
        """
        async with self._lock.read():
            return list(self._playlists)

    async def delete(self, playlist_id: uuid.UUID) -> None:
        """Deletes a playlist, keeping the relative order of the others.

        Raises:
            PlaylistNotFound: If no playlist has this ID.
        """
        async with self._lock.write():
            playlist = self._find(playlist_id)
            self._playlists.remove(playlist)

        logger.info(f"Playlist deleted: {playlist.name} ({playlist.id})")

    # -------------------------------------------------------------------------
    # Songs
    # -------------------------------------------------------------------------

    async def add_song(self, playlist_id: uuid.UUID, song: Song) -> Playlist:
        async with self._lock.write():
            playlist = self._find(playlist_id)
            playlist.add_song(song)

        logger.debug(f"Song {song.id} added to playlist {playlist.id}")
        return playlist

    async def add_songs(self, playlist_id: uuid.UUID, songs: Iterable[Song]) -> Playlist:
        songs = list(songs)

        async with self._lock.write():
            playlist = self._find(playlist_id)
            playlist.add_songs(songs)

        logger.debug(f"{len(songs)} songs added to playlist {playlist.id}")
        return playlist

    async def remove_song(self, playlist_id: uuid.UUID, song_id: uuid.UUID) -> bool:
        """Removes the first song with the given ID from a playlist.

        Returns:
            Whether the song was found and removed.

        Raises:
            PlaylistNotFound: If no playlist has this ID.
        """
        async with self._lock.write():
            playlist = self._find(playlist_id)
            removed = playlist.remove_song(song_id)

        if removed:
            logger.debug(f"Song {song_id} removed from playlist {playlist.id}")
        return removed

    async def shuffle(self, playlist_id: uuid.UUID) -> Playlist:
        async with self._lock.write():
            playlist = self._find(playlist_id)
            playlist.shuffle(self.rng)

        return playlist

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    async def search(self, query: str) -> list[SearchResult]:
        """Finds every song whose title, artist, album or genre contains the query.

        The match is case-insensitive. Each playlist is scanned by its own task,
        all of them feeding a shared queue drained by a collector task. Results
        are therefore in no particular order.
        """
        needle = query.lower()
        results: list[SearchResult] = []
        queue: asyncio.Queue[SearchResult | None] = asyncio.Queue(maxsize=self.search_buffer_size)

        async def _scan(playlist: Playlist) -> None:
            for song in list(playlist.songs):
                if song_matches(song, needle):
                    await queue.put(
                        SearchResult(
                            song=song,
                            playlist_id=playlist.id,
                            playlist_name=playlist.name,
                        )
                    )

        async def _collect() -> None:
            while (result := await queue.get()) is not None:
                results.append(result)

        async with self._lock.read():
            collector = asyncio.create_task(_collect())
            try:
                async with asyncio.TaskGroup() as tg:
                    for playlist in self._playlists:
                        tg.create_task(_scan(playlist))
            except BaseException:
                collector.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await collector
                raise

            # Every producer is done: tell the collector to stop.
            await queue.put(None)
            await collector

        logger.debug(f"Search '{query}' matched {len(results)} songs")
        return results

    async def get_statistics(self) -> Statistics:
        genre_counts: Counter[str] = Counter()
        artist_counts: Counter[str] = Counter()
        total_songs = 0
        total_duration = timedelta()

        async with self._lock.read():
            total_playlists = len(self._playlists)

            for playlist in self._playlists:
                total_songs += playlist.song_count
                total_duration += playlist.total_duration()

                for song in playlist.songs:
                    genre_counts[song.genre] += 1
                    artist_counts[song.artist] += 1

        return Statistics(
            total_playlists=total_playlists,
            total_songs=total_songs,
            total_duration=total_duration,
            genre_counts=dict(genre_counts),
            artist_counts=dict(artist_counts),
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _find(self, playlist_id: uuid.UUID) -> Playlist:
        for playlist in self._playlists:
            if playlist.id == playlist_id:
                return playlist

        raise PlaylistNotFound(f"Playlist not found: {playlist_id}")
