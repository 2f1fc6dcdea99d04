import typer

from playlister.domain.entities.music import Statistics
from playlister.infrastructure.entrypoints.cli.dependencies import get_playlist_manager
from playlister.infrastructure.entrypoints.cli.formatters import format_total_duration


async def stats_logic() -> Statistics:
    async with get_playlist_manager() as playlist_manager:
        return await playlist_manager.get_statistics()


def print_statistics(statistics: Statistics) -> None:
    typer.echo("STATISTICS")
    typer.echo(f"Total Playlists: {statistics.total_playlists}")
    typer.echo(f"Total Songs: {statistics.total_songs}")
    typer.echo(f"Total Duration: {format_total_duration(statistics.total_duration)}")

    typer.echo("\nTop Genres:")
    for genre, count in sorted(statistics.genre_counts.items(), key=lambda item: (-item[1], item[0])):
        typer.echo(f"  - {genre or '(none)'}: {count} songs")

    typer.echo("\nTop Artists:")
    for artist, count in sorted(statistics.artist_counts.items(), key=lambda item: (-item[1], item[0])):
        typer.echo(f"  - {artist or '(none)'}: {count} songs")
