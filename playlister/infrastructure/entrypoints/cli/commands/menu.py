import uuid
from collections.abc import Awaitable
from collections.abc import Callable
from typing import Final

from pydantic import ValidationError

import typer

from playlister.application.services.playlist_manager import PlaylistManager
from playlister.domain.entities.music import Playlist
from playlister.domain.exceptions import PlaylistNotFound
from playlister.domain.exceptions import StorageError
from playlister.domain.schemas.music import PlaylistCreate
from playlister.domain.schemas.music import SongCreate
from playlister.infrastructure.entrypoints.cli.commands.stats import print_statistics
from playlister.infrastructure.entrypoints.cli.dependencies import get_playlist_manager
from playlister.infrastructure.entrypoints.cli.formatters import format_playlist
from playlister.infrastructure.entrypoints.cli.formatters import format_playlist_details
from playlister.infrastructure.entrypoints.cli.formatters import format_search_result
from playlister.infrastructure.entrypoints.cli.formatters import format_song
from playlister.infrastructure.entrypoints.cli.parsers import parse_duration
from playlister.infrastructure.entrypoints.cli.parsers import parse_year

MENU_OPTIONS: Final[list[tuple[str, str]]] = [
    ("1", "Create A Playlist"),
    ("2", "List Playlists"),
    ("3", "View Playlist Details"),
    ("4", "Add Song to Playlist"),
    ("5", "Remove Song from Playlist"),
    ("6", "Search Songs"),
    ("7", "Shuffle Playlist"),
    ("8", "Delete Playlist"),
    ("9", "Show Statistics"),
    ("0", "Exit"),
]


class InteractiveMenu:
    """A line-oriented menu driving a playlist manager.

    Every successful mutation is saved right away. A failed save is reported
    but the mutation stays in memory, and is saved again on the next mutation
    or on exit.
    """

    def __init__(self, playlist_manager: PlaylistManager) -> None:
        self.playlist_manager = playlist_manager

        self._actions: dict[str, Callable[[], Awaitable[None]]] = {
            "1": self.create_playlist,
            "2": self.list_playlists,
            "3": self.view_playlist,
            "4": self.add_song,
            "5": self.remove_song,
            "6": self.search_songs,
            "7": self.shuffle_playlist,
            "8": self.delete_playlist,
            "9": self.show_statistics,
        }

    async def run(self) -> None:
        typer.echo("Music Playlist Manager\n")

        while True:
            self._show_main_menu()
            try:
                choice = self._read_input("Enter your choice")
            except typer.Abort:
                # End of input: leave as if "Exit" was chosen.
                choice = "0"

            if choice == "0":
                await self.exit()
                return

            action = self._actions.get(choice)
            if action is None:
                typer.echo("Invalid option.")
            else:
                await action()
            typer.echo()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    async def create_playlist(self) -> None:
        typer.echo("\nCREATE NEW PLAYLIST")
        name = self._read_input("Playlist name")
        if not name:
            typer.echo("Playlist name cannot be empty.")
            return

        try:
            playlist_data = PlaylistCreate(name=name, description=self._read_input("Description"))
        except ValidationError as e:
            typer.echo(f"Invalid playlist: {e.errors()[0]['msg']}")
            return

        playlist = await self.playlist_manager.create(name=playlist_data.name, description=playlist_data.description)
        await self._save()
        typer.echo(f"Created playlist: {format_playlist(playlist)}")

    async def list_playlists(self) -> None:
        playlists = await self.playlist_manager.get_list()
        if not playlists:
            typer.echo("\nNo playlists found.")
            return

        typer.echo("\nALL PLAYLISTS:")
        for i, playlist in enumerate(playlists, start=1):
            typer.echo(f"{i}. {format_playlist(playlist)}")

    async def view_playlist(self) -> None:
        playlist = await self._select_playlist("Enter playlist ID")
        if playlist is None:
            return

        typer.echo()
        typer.echo(format_playlist_details(playlist))

    async def add_song(self) -> None:
        playlist = await self._select_playlist("Enter playlist ID")
        if playlist is None:
            return

        typer.echo("\nADD SONG")
        title = self._read_input("Title")
        if not title:
            typer.echo("Title cannot be empty.")
            return

        artist = self._read_input("Artist")
        album = self._read_input("Album")
        genre = self._read_input("Genre")

        try:
            duration = parse_duration(self._read_input("Duration (MM:SS)"))
        except ValueError as e:
            typer.echo(f"Invalid duration format: {e}")
            return

        year = parse_year(self._read_input("Year"))

        try:
            song = SongCreate(
                title=title,
                artist=artist,
                album=album,
                genre=genre,
                year=year,
                duration=duration,
            ).to_song()
        except ValidationError as e:
            typer.echo(f"Invalid song: {e.errors()[0]['msg']}")
            return

        try:
            await self.playlist_manager.add_song(playlist.id, song)
        except PlaylistNotFound as e:
            typer.echo(str(e))
            return

        await self._save()
        typer.echo(f"Added song: {format_song(song)}")

    async def remove_song(self) -> None:
        playlist = await self._select_playlist("Enter playlist ID")
        if playlist is None:
            return

        if not playlist.songs:
            typer.echo("Playlist is empty.")
            return

        typer.echo("\nSONGS IN PLAYLIST:")
        for i, song in enumerate(playlist.songs, start=1):
            typer.echo(f"{i}. {format_song(song)}")

        song_id = self._parse_id(self._read_input("\nEnter song ID to remove"))
        song = playlist.get_song(song_id) if song_id is not None else None
        if song is None:
            typer.echo("Song not found.")
            return

        try:
            removed = await self.playlist_manager.remove_song(playlist.id, song.id)
        except PlaylistNotFound as e:
            typer.echo(str(e))
            return

        if not removed:
            typer.echo("Song not found.")
            return

        await self._save()
        typer.echo("Song removed successfully.")

    async def search_songs(self) -> None:
        query = self._read_input("\nEnter search query")
        if not query:
            return

        results = await self.playlist_manager.search(query)
        if not results:
            typer.echo("No songs found matching your query.")
            return

        typer.echo(f"\nFound {len(results)} result(s):")
        for i, result in enumerate(results, start=1):
            typer.echo(f"{i}. {format_search_result(result)}")

    async def shuffle_playlist(self) -> None:
        playlist = await self._select_playlist("Enter playlist ID to shuffle")
        if playlist is None:
            return

        if not playlist.songs:
            typer.echo("Playlist is empty.")
            return

        try:
            await self.playlist_manager.shuffle(playlist.id)
        except PlaylistNotFound as e:
            typer.echo(str(e))
            return

        await self._save()
        typer.echo("Playlist shuffled successfully.")

    async def delete_playlist(self) -> None:
        if not await self.playlist_manager.get_list():
            typer.echo("\nNo playlists to delete.")
            return

        await self.list_playlists()
        playlist_id = self._parse_id(self._read_input("\nEnter playlist ID to delete"))

        confirm = self._read_input("Are you sure? (yes/no)")
        if confirm.lower() != "yes":
            typer.echo("Deletion cancelled.")
            return

        try:
            if playlist_id is None:
                raise PlaylistNotFound("Playlist not found: invalid ID")
            await self.playlist_manager.delete(playlist_id)
        except PlaylistNotFound as e:
            typer.echo(str(e))
            return

        await self._save()
        typer.echo("Playlist deleted successfully.")

    async def show_statistics(self) -> None:
        typer.echo()
        print_statistics(await self.playlist_manager.get_statistics())

    async def exit(self) -> None:
        typer.echo("\nSaving data...")
        await self._save()
        typer.echo("Exiting.")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _show_main_menu(self) -> None:
        typer.echo("MAIN MENU")
        for key, label in MENU_OPTIONS:
            typer.echo(f"{key}. {label}")

    def _read_input(self, prompt: str) -> str:
        return typer.prompt(prompt, default="", show_default=False).strip()

    def _parse_id(self, value: str) -> uuid.UUID | None:
        try:
            return uuid.UUID(value)
        except ValueError:
            return None

    async def _select_playlist(self, prompt: str) -> Playlist | None:
        if not await self.playlist_manager.get_list():
            typer.echo("\nNo playlists available.")
            return None

        await self.list_playlists()
        playlist_id = self._parse_id(self._read_input(f"\n{prompt}"))

        try:
            if playlist_id is None:
                raise PlaylistNotFound("Playlist not found: invalid ID")
            return await self.playlist_manager.get(playlist_id)
        except PlaylistNotFound as e:
            typer.echo(str(e))
            return None

    async def _save(self) -> None:
        try:
            await self.playlist_manager.save()
        except StorageError as e:
            typer.secho(f"Error saving data: {e}", fg=typer.colors.RED, err=True)


async def menu_logic() -> None:
    async with get_playlist_manager(strict=False) as playlist_manager:
        await InteractiveMenu(playlist_manager).run()
