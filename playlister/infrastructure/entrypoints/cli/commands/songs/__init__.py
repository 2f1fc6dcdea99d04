import asyncio
import uuid
from datetime import timedelta
from pathlib import Path

import typer

from playlister.domain.schemas.music import SongCreate
from playlister.infrastructure.entrypoints.cli.commands.songs.add import song_add_logic
from playlister.infrastructure.entrypoints.cli.commands.songs.remove import song_remove_logic
from playlister.infrastructure.entrypoints.cli.commands.songs.scan import song_import_logic
from playlister.infrastructure.entrypoints.cli.commands.songs.scan import song_scan_logic
from playlister.infrastructure.entrypoints.cli.commands.songs.search import song_search_logic
from playlister.infrastructure.entrypoints.cli.formatters import format_search_result
from playlister.infrastructure.entrypoints.cli.formatters import format_song
from playlister.infrastructure.entrypoints.cli.parsers import parse_duration_option
from playlister.infrastructure.entrypoints.cli.parsers import parse_search_query
from playlister.infrastructure.entrypoints.cli.parsers import parse_song_title
from playlister.infrastructure.entrypoints.cli.parsers import parse_year

app = typer.Typer()


@app.command("add", help="Add a song to a playlist.")
def add(
    playlist_id: uuid.UUID = typer.Argument(..., help="Playlist ID"),
    title: str = typer.Option(..., help="Song title", parser=parse_song_title),
    artist: str = typer.Option("", help="Song artist"),
    album: str = typer.Option("", help="Song album"),
    genre: str = typer.Option("", help="Song genre"),
    duration: timedelta = typer.Option("0:00", help="Song duration (MM:SS)", parser=parse_duration_option),
    year: str = typer.Option("", help="Release year, defaults to the current one if unparsable"),
):
    song_data = SongCreate(
        title=title,
        artist=artist,
        album=album,
        genre=genre,
        year=parse_year(year),
        duration=duration,
    )

    try:
        song = asyncio.run(song_add_logic(playlist_id, song_data))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho(f"Added song: {format_song(song)}", fg=typer.colors.GREEN)


@app.command("remove", help="Remove a song from a playlist.")
def remove(
    playlist_id: uuid.UUID = typer.Argument(..., help="Playlist ID"),
    song_id: uuid.UUID = typer.Argument(..., help="Song ID"),
):
    try:
        asyncio.run(song_remove_logic(playlist_id, song_id))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho("Song removed successfully.", fg=typer.colors.GREEN)


@app.command("search", help="Search songs by title, artist, album or genre.")
def search(query: str = typer.Argument(..., help="Case-insensitive search query", parser=parse_search_query)):
    try:
        results = asyncio.run(song_search_logic(query))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    if not results:
        typer.echo("No songs found matching your query.")
        return

    typer.echo(f"Found {len(results)} result(s):")
    for i, result in enumerate(results, start=1):
        typer.echo(f"{i}. {format_search_result(result)}")


@app.command("scan", help="Add every audio file found in a folder to a playlist.")
def scan(
    playlist_id: uuid.UUID = typer.Argument(..., help="Playlist ID"),
    folder: Path = typer.Argument(..., help="Folder to scan recursively"),
):
    try:
        songs = asyncio.run(song_scan_logic(playlist_id, folder))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho(f"{len(songs)} songs added.", fg=typer.colors.GREEN)
    for song in songs:
        typer.echo(f"- {format_song(song)}")


@app.command("import", help="Add a single audio file to a playlist.")
def import_file(
    playlist_id: uuid.UUID = typer.Argument(..., help="Playlist ID"),
    path: Path = typer.Argument(..., help="Audio file to import"),
    duration: timedelta | None = typer.Option(
        None,
        help="Song duration (MM:SS), read from the file if omitted",
        parser=parse_duration_option,
    ),
):
    try:
        song = asyncio.run(song_import_logic(playlist_id, path, duration=duration))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho(f"Added song: {format_song(song)}", fg=typer.colors.GREEN)
