import uuid
from datetime import datetime
from datetime import timedelta
from typing import Annotated
from typing import Self

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_serializer

from playlister.domain.entities.music import Playlist


class HealthCheckResponse(BaseModel):
    status: str
    playlists: int


class SuccessResponse(BaseModel):
    message: str


class SongImportRequest(BaseModel):
    file_path: Annotated[str, Field(min_length=1)]
    duration: timedelta | None = Field(default=None, description="In seconds, read from the file if omitted")


class FolderScanRequest(BaseModel):
    folder_path: Annotated[str, Field(min_length=1)]


class SongResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    artist: str
    album: str
    genre: str
    year: int
    duration: timedelta
    file_path: str | None

    @field_serializer("duration")
    def serialize_duration(self, value: timedelta) -> float:
        return value.total_seconds()


class PlaylistResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: str
    songs: list[SongResponse]
    song_count: int
    total_duration: timedelta
    created_at: datetime
    updated_at: datetime

    @field_serializer("total_duration")
    def serialize_total_duration(self, value: timedelta) -> float:
        return value.total_seconds()

    @classmethod
    def from_entity(cls, playlist: Playlist) -> Self:
        return cls(
            id=playlist.id,
            name=playlist.name,
            description=playlist.description,
            songs=[SongResponse.model_validate(song) for song in playlist.songs],
            song_count=playlist.song_count,
            total_duration=playlist.total_duration(),
            created_at=playlist.created_at,
            updated_at=playlist.updated_at,
        )


class SearchResultResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    song: SongResponse
    playlist_id: uuid.UUID
    playlist_name: str


class StatisticsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_playlists: int
    total_songs: int
    total_duration: timedelta
    genre_counts: dict[str, int]
    artist_counts: dict[str, int]

    @field_serializer("total_duration")
    def serialize_total_duration(self, value: timedelta) -> float:
        return value.total_seconds()
