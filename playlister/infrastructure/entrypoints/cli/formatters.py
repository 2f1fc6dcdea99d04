from datetime import timedelta

from playlister.domain.entities.music import Playlist
from playlister.domain.entities.music import SearchResult
from playlister.domain.entities.music import Song


def format_duration(duration: timedelta) -> str:
    """Formats a song duration as `M:SS`."""
    minutes, seconds = divmod(int(duration.total_seconds()), 60)
    return f"{minutes}:{seconds:02d}"


def format_total_duration(duration: timedelta) -> str:
    """Formats an aggregated duration as `Xh Ym Zs`, hours omitted when zero."""
    hours, remainder = divmod(int(duration.total_seconds()), 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    return f"{minutes}m {seconds}s"


def format_song(song: Song) -> str:
    return f"[{song.id}] {song.title} - {song.artist} ({song.album}) [{song.genre}] - {format_duration(song.duration)}"


def format_playlist(playlist: Playlist) -> str:
    return (
        f"[{playlist.id}] {playlist.name} - {playlist.song_count} songs "
        f"({format_duration(playlist.total_duration())} total)"
    )


def format_search_result(result: SearchResult) -> str:
    return f"{format_song(result.song)} (in playlist: {result.playlist_name})"


def format_playlist_details(playlist: Playlist) -> str:
    lines = [
        f"PLAYLIST: {playlist.name}",
        f"Description: {playlist.description}",
        f"Created: {playlist.created_at:%Y-%m-%d %H:%M}",
        f"Total Songs: {playlist.song_count}",
        f"Total Duration: {format_total_duration(playlist.total_duration())}",
    ]

    if not playlist.songs:
        lines.append("(Empty playlist)")
    else:
        lines += [f"{i}. {format_song(song)}" for i, song in enumerate(playlist.songs, start=1)]

    return "\n".join(lines)
