import uuid
from typing import Any

from pydantic import AwareDatetime
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import NonNegativeInt
from pydantic import TypeAdapter
from pydantic import field_validator


class SongRecord(BaseModel):
    """A song as stored in the playlists file.

    The duration is a number of nanoseconds.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    file_path: str = Field(default="", alias="filePath")
    title: str
    artist: str = ""
    album: str = ""
    duration: NonNegativeInt = 0
    genre: str = ""
    year: int


class PlaylistRecord(BaseModel):
    id: uuid.UUID
    name: str
    description: str = ""
    songs: list[SongRecord] = Field(default_factory=list)
    created_at: AwareDatetime
    updated_at: AwareDatetime

    @field_validator("songs", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


PlaylistRecordList: TypeAdapter[list[PlaylistRecord]] = TypeAdapter(list[PlaylistRecord])
