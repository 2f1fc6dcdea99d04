from datetime import timedelta
from typing import Annotated
from typing import Any

from pydantic import Field
from pydantic import field_validator

from playlister.domain.entities.music import Song
from playlister.domain.entities.music import current_year
from playlister.domain.schemas.base import BaseEntity


class PlaylistCreate(BaseEntity):
    """Schema for creating a new playlist.

    The name is required and cannot be blank, the description is free text.
    """

    name: Annotated[str, Field(min_length=1, max_length=255)]
    description: str = ""


class SongCreate(BaseEntity):
    """Schema for creating a new song before attaching it to a playlist.

    The title is the only required field. An unparsable year falls back to the
    current year, and the duration accepts a number of seconds.
    """

    title: Annotated[str, Field(min_length=1, max_length=255)]
    artist: str = ""
    album: str = ""
    genre: str = ""
    year: int = Field(default_factory=current_year)
    duration: timedelta = timedelta()

    @field_validator("year", mode="before")
    @classmethod
    def fallback_year(cls, value: Any) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return current_year()

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("Duration cannot be negative")
        return value

    def to_song(self) -> Song:
        return Song(**self.model_dump())
