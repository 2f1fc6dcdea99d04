import re
from datetime import timedelta
from typing import Annotated

from pydantic import TypeAdapter
from pydantic import ValidationError

import typer

from playlister.domain.entities.music import current_year
from playlister.domain.schemas.music import PlaylistCreate
from playlister.domain.schemas.music import SongCreate

DURATION_PATTERN = re.compile(r"^(?P<minutes>\d+):(?P<seconds>\d{1,2})$")

playlist_name_field_info = PlaylistCreate.model_fields["name"]
song_title_field_info = SongCreate.model_fields["title"]

PlaylistNameAdapter: TypeAdapter[str] = TypeAdapter(
    Annotated[playlist_name_field_info.annotation, playlist_name_field_info]
)
SongTitleAdapter: TypeAdapter[str] = TypeAdapter(Annotated[song_title_field_info.annotation, song_title_field_info])


def parse_playlist_name(value: str) -> str:
    try:
        return PlaylistNameAdapter.validate_python(value.strip())
    except ValidationError as e:
        raise typer.BadParameter(e.errors()[0]["msg"]) from e


def parse_song_title(value: str) -> str:
    try:
        return SongTitleAdapter.validate_python(value.strip())
    except ValidationError as e:
        raise typer.BadParameter(e.errors()[0]["msg"]) from e


def parse_duration(value: str) -> timedelta:
    """Parses a `MM:SS` duration.

    Raises:
        ValueError: If the value does not follow the format.
    """
    match = DURATION_PATTERN.match(value.strip())
    if match is None:
        raise ValueError("invalid format, use MM:SS")

    return timedelta(minutes=int(match["minutes"]), seconds=int(match["seconds"]))


def parse_duration_option(value: str) -> timedelta:
    try:
        return parse_duration(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def parse_year(value: str) -> int:
    """Parses a year, falling back to the current one when unparsable."""
    try:
        return int(value.strip())
    except ValueError:
        return current_year()


def parse_search_query(value: str) -> str:
    query = value.strip()
    if not query:
        raise typer.BadParameter("Search query cannot be empty")

    return query
