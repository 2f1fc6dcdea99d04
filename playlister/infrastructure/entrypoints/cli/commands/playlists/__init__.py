import asyncio
import uuid

import typer

from playlister.infrastructure.entrypoints.cli.commands.playlists.create import playlist_create_logic
from playlister.infrastructure.entrypoints.cli.commands.playlists.delete import playlist_delete_logic
from playlister.infrastructure.entrypoints.cli.commands.playlists.show import playlist_list_logic
from playlister.infrastructure.entrypoints.cli.commands.playlists.show import playlist_show_logic
from playlister.infrastructure.entrypoints.cli.commands.playlists.shuffle import playlist_shuffle_logic
from playlister.infrastructure.entrypoints.cli.formatters import format_playlist
from playlister.infrastructure.entrypoints.cli.formatters import format_playlist_details
from playlister.infrastructure.entrypoints.cli.parsers import parse_playlist_name

app = typer.Typer()


@app.command("create", help="Create a new playlist.")
def create(
    name: str = typer.Option(..., help="Playlist name", parser=parse_playlist_name),
    description: str = typer.Option("", help="Playlist description"),
):
    try:
        playlist = asyncio.run(playlist_create_logic(name=name, description=description))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho(f"Created playlist: {format_playlist(playlist)}", fg=typer.colors.GREEN)


@app.command("list", help="List all the playlists.")
def list_playlists():
    try:
        playlists = asyncio.run(playlist_list_logic())
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    if not playlists:
        typer.echo("No playlists found.")
        return

    for i, playlist in enumerate(playlists, start=1):
        typer.echo(f"{i}. {format_playlist(playlist)}")


@app.command("show", help="Show a playlist with its songs.")
def show(playlist_id: uuid.UUID = typer.Argument(..., help="Playlist ID")):
    try:
        playlist = asyncio.run(playlist_show_logic(playlist_id))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.echo(format_playlist_details(playlist))


@app.command("delete", help="Delete a playlist.")
def delete(
    playlist_id: uuid.UUID = typer.Argument(..., help="Playlist ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    if not yes:
        typer.confirm("Are you sure?", abort=True)

    try:
        asyncio.run(playlist_delete_logic(playlist_id))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho("Playlist deleted successfully.", fg=typer.colors.GREEN)


@app.command("shuffle", help="Shuffle the songs of a playlist.")
def shuffle(playlist_id: uuid.UUID = typer.Argument(..., help="Playlist ID")):
    try:
        playlist = asyncio.run(playlist_shuffle_logic(playlist_id))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho("Playlist shuffled successfully.", fg=typer.colors.GREEN)
    typer.echo(format_playlist_details(playlist))
