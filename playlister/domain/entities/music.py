import random
import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field
from datetime import UTC
from datetime import date
from datetime import datetime
from datetime import timedelta
from typing import Any

_system_random = random.SystemRandom()


def utc_now() -> datetime:
    return datetime.now(UTC)


def current_year() -> int:
    return date.today().year


@dataclass(frozen=True, kw_only=True)
class Song:
    """A single track's metadata.

    Songs are immutable once created: a playlist only ever appends, removes or
    reorders them.
    """

    id: uuid.UUID = field(default_factory=uuid.uuid4)

    title: str
    artist: str = ""
    album: str = ""
    genre: str = ""
    year: int = field(default_factory=current_year)
    duration: timedelta = field(default_factory=timedelta)

    file_path: str | None = None

    def __post_init__(self) -> None:
        if self.duration < timedelta(0):
            raise ValueError("Song duration cannot be negative")


@dataclass(kw_only=True)
class Playlist:
    """A named, ordered collection of songs.

    The order of `songs` is the playback order. Every mutation bumps
    `updated_at`, which never goes below `created_at`.
    """

    id: uuid.UUID = field(default_factory=uuid.uuid4)

    name: str
    description: str = ""

    songs: list[Song] = field(default_factory=list)

    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        self.updated_at = max(self.updated_at, self.created_at)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Playlist identity cannot be reassigned")
        super().__setattr__(name, value)

    @property
    def song_count(self) -> int:
        return len(self.songs)

    def add_song(self, song: Song) -> None:
        self.songs.append(song)
        self._touch()

    def add_songs(self, songs: Iterable[Song]) -> None:
        self.songs.extend(songs)
        self._touch()

    def remove_song(self, song_id: uuid.UUID) -> bool:
        """Removes the first song matching the given ID.

        Returns:
            Whether a song was removed. `updated_at` is left untouched otherwise.
        """
        for index, song in enumerate(self.songs):
            if song.id == song_id:
                del self.songs[index]
                self._touch()
                return True

        return False

    def get_song(self, song_id: uuid.UUID) -> Song | None:
        return next((song for song in self.songs if song.id == song_id), None)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Reorders the songs in place with a uniformly random permutation.

        Args:
            rng: The random generator to use. Defaults to an OS-entropy backed one,
                pass a seeded `random.Random` for a reproducible order.
        """
        (rng or _system_random).shuffle(self.songs)
        self._touch()

    def total_duration(self) -> timedelta:
        return sum((song.duration for song in self.songs), timedelta())

    def _touch(self) -> None:
        self.updated_at = max(utc_now(), self.created_at)


@dataclass(frozen=True, kw_only=True)
class SearchResult:
    """A song matching a search, with the playlist it belongs to."""

    song: Song
    playlist_id: uuid.UUID
    playlist_name: str


@dataclass(frozen=True, kw_only=True)
class Statistics:
    total_playlists: int = 0
    total_songs: int = 0
    total_duration: timedelta = field(default_factory=timedelta)

    genre_counts: dict[str, int] = field(default_factory=dict)
    artist_counts: dict[str, int] = field(default_factory=dict)
