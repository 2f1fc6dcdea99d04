import asyncio
from typing import get_args

import click
import typer

from playlister import __version__
from playlister.infrastructure.config.loggers import configure_loggers
from playlister.infrastructure.config.settings.app import app_settings
from playlister.infrastructure.entrypoints.cli.commands import playlists
from playlister.infrastructure.entrypoints.cli.commands import songs
from playlister.infrastructure.entrypoints.cli.commands.menu import menu_logic
from playlister.infrastructure.entrypoints.cli.commands.stats import print_statistics
from playlister.infrastructure.entrypoints.cli.commands.stats import stats_logic
from playlister.infrastructure.types import LogHandler
from playlister.infrastructure.types import LogLevel

app = typer.Typer(
    name="playlister",
    help="Manage music playlists from the command line.",
    no_args_is_help=True,
)
app.add_typer(playlists.app, name="playlists", help="Manage playlists.")
app.add_typer(songs.app, name="songs", help="Manage the songs of playlists.")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Playlister Version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option(
        app_settings.LOG_LEVEL_CLI,
        "--log-level",
        help="Logging level of the application.",
        click_type=click.Choice(get_args(LogLevel)),
    ),
    log_handlers: list[str] = typer.Option(
        app_settings.LOG_HANDLERS_CLI,
        "--log-handler",
        help="Logging handler to use, may be repeated.",
        click_type=click.Choice(get_args(LogHandler)),
    ),
) -> None:
    configure_loggers(level=log_level, handlers=log_handlers)  # type: ignore[arg-type]


@app.command("menu", help="Run the interactive menu.")
def menu() -> None:
    try:
        asyncio.run(menu_logic())
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e


@app.command("stats", help="Show statistics across all playlists.")
def stats() -> None:
    try:
        statistics = asyncio.run(stats_logic())
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    print_statistics(statistics)


@app.command("serve", help="Run the HTTP API server.")
def serve(  # pragma: no cover
    host: str = typer.Option(app_settings.HOST, help="Interface to bind."),
    port: int = typer.Option(app_settings.PORT, help="Port to bind.", min=1, max=65535),
    reload: bool = typer.Option(False, "--reload/--no-reload", help="Reload on code changes."),
) -> None:
    import uvicorn

    uvicorn.run(
        "playlister.infrastructure.entrypoints.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


if __name__ == "__main__":  # pragma: no cover
    app()
