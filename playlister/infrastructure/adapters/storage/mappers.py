from datetime import timedelta
from typing import Final

from playlister.domain.entities.music import Playlist
from playlister.domain.entities.music import Song
from playlister.infrastructure.adapters.storage.schemas import PlaylistRecord
from playlister.infrastructure.adapters.storage.schemas import SongRecord

NANOSECONDS_PER_MICROSECOND: Final[int] = 1_000
NANOSECONDS_PER_SECOND: Final[int] = 1_000_000_000


def duration_to_nanoseconds(duration: timedelta) -> int:
    seconds = duration.days * 86_400 + duration.seconds
    return seconds * NANOSECONDS_PER_SECOND + duration.microseconds * NANOSECONDS_PER_MICROSECOND


def nanoseconds_to_duration(nanoseconds: int) -> timedelta:
    # Sub-microsecond precision is truncated.
    return timedelta(microseconds=nanoseconds // NANOSECONDS_PER_MICROSECOND)


def to_song_record(song: Song) -> SongRecord:
    return SongRecord(
        id=song.id,
        file_path=song.file_path or "",
        title=song.title,
        artist=song.artist,
        album=song.album,
        duration=duration_to_nanoseconds(song.duration),
        genre=song.genre,
        year=song.year,
    )


def to_playlist_record(playlist: Playlist) -> PlaylistRecord:
    return PlaylistRecord(
        id=playlist.id,
        name=playlist.name,
        description=playlist.description,
        songs=[to_song_record(song) for song in playlist.songs],
        created_at=playlist.created_at,
        updated_at=playlist.updated_at,
    )


def to_domain_song(record: SongRecord) -> Song:
    """Converts a stored song record to a domain Song entity."""
    return Song(
        id=record.id,
        title=record.title,
        artist=record.artist,
        album=record.album,
        genre=record.genre,
        year=record.year,
        duration=nanoseconds_to_duration(record.duration),
        file_path=record.file_path or None,
    )


def to_domain_playlist(record: PlaylistRecord) -> Playlist:
    """Converts a stored playlist record, songs included, to a domain Playlist entity."""
    return Playlist(
        id=record.id,
        name=record.name,
        description=record.description,
        songs=[to_domain_song(song) for song in record.songs],
        created_at=record.created_at,
        updated_at=record.updated_at,
    )
