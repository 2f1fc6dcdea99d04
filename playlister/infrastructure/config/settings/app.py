from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from playlister import BASE_DIR
from playlister.infrastructure.types import LogHandler
from playlister.infrastructure.types import LogLevel


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PLAYLISTER_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    DEBUG: bool = False

    API_V1_PREFIX: str = "/api/v1"

    HOST: str = "127.0.0.1"
    PORT: int = Field(default=8080, ge=1, le=65535)

    # Relative paths are resolved from the current working directory.
    DATA_FILE: Path = Path("playlists.json")

    SEARCH_BUFFER_SIZE: int = Field(default=100, ge=1)

    SCAN_MAX_CONCURRENCY: int = Field(default=10, ge=1)
    SCAN_DEFAULT_DURATION: int = Field(default=180, ge=0, description="In seconds")

    LOG_LEVEL_API: LogLevel = "INFO"
    LOG_HANDLERS_API: list[LogHandler] = ["console"]

    LOG_LEVEL_CLI: LogLevel = "WARNING"
    LOG_HANDLERS_CLI: list[LogHandler] = ["cli_alert"]


app_settings = AppSettings()
