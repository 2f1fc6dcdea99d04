import asyncio
import logging
import os
from datetime import timedelta
from pathlib import Path
from typing import Any
from typing import Final

from mutagen import File as MutagenFile  # type: ignore[attr-defined]
from mutagen import MutagenError

from playlister.domain.entities.music import Song
from playlister.domain.entities.music import current_year
from playlister.domain.exceptions import MusicScanError
from playlister.domain.ports.scanner import MusicScannerPort
from playlister.domain.types import AudioExtension

logger = logging.getLogger(__name__)

# Easy keys first, then raw ID3 frames and MP4 atoms for formats without easy tags.
TAG_KEYS: Final[dict[str, tuple[str, ...]]] = {
    "title": ("title", "TIT2", "©nam"),
    "artist": ("artist", "TPE1", "©ART"),
    "album": ("album", "TALB", "©alb"),
    "genre": ("genre", "TCON", "©gen"),
    "year": ("date", "year", "TDRC", "TYER", "©day"),
}


class MutagenMusicScanner(MusicScannerPort):
    """Builds songs from audio files, reading their tags with mutagen.

    Metadata is best-effort: missing tags become empty strings, the title falls
    back to the file name and the year to the current year. The duration is the
    stream length when mutagen reports one, otherwise `default_duration`.
    """

    def __init__(
        self,
        default_duration: timedelta = timedelta(seconds=180),
        max_concurrency: int = 10,
    ) -> None:
        self.default_duration = default_duration
        self.max_concurrency = max_concurrency

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def scan(self, root: Path) -> list[Song]:
        if not root.exists():
            raise MusicScanError(f"Folder not found: {root}")
        if not root.is_dir():
            raise MusicScanError(f"Provided path is not a directory: {root}")

        paths = await asyncio.to_thread(self._discover_audio_files, root)
        logger.info(f"Found {len(paths)} audio files in {root}. Reading metadata...")

        # Bound the number of files opened at the same time.
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _read_with_semaphore(path: Path) -> Song | None:
            async with semaphore:
                try:
                    return await self.read_song(path)
                except MusicScanError as e:
                    logger.warning(f"Skip file {path}: {e}")
                    return None

        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(_read_with_semaphore(path)) for path in paths]

        songs = [song for task in tasks if (song := task.result()) is not None]
        if not songs:
            raise MusicScanError(f"No songs found in {root}")

        return songs

    async def read_song(self, path: Path, duration: timedelta | None = None) -> Song:
        return await asyncio.to_thread(self._read_song, path, duration)

    # -------------------------------------------------------------------------
    # Core Logic
    # -------------------------------------------------------------------------

    def _discover_audio_files(self, root: Path) -> list[Path]:
        audio_files: list[Path] = []

        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if AudioExtension.is_supported(Path(filename).suffix):
                    audio_files.append(Path(dirpath) / filename)

        return audio_files

    def _on_walk_error(self, error: OSError) -> None:
        logger.warning(f"Cannot read directory {error.filename}: {error.strerror}")

    def _read_song(self, path: Path, duration: timedelta | None) -> Song:
        try:
            audio = MutagenFile(path, easy=True)
        except (MutagenError, OSError) as e:
            raise MusicScanError(f"Failed to read audio file {path}: {e}") from e

        if audio is None:
            logger.debug(f"Unknown audio format for {path}, using the file name only")

        tags = audio.tags if audio is not None and audio.tags else {}

        return Song(
            title=self._extract_tag(tags, "title") or path.name,
            artist=self._extract_tag(tags, "artist"),
            album=self._extract_tag(tags, "album"),
            genre=self._extract_tag(tags, "genre"),
            year=self._parse_year(self._extract_tag(tags, "year")),
            duration=duration if duration is not None else self._extract_length(audio),
            file_path=str(path),
        )

    # -------------------------------------------------------------------------
    # Extractors
    # -------------------------------------------------------------------------

    def _extract_tag(self, tags: Any, field_name: str) -> str:
        for key in TAG_KEYS[field_name]:
            if key not in tags:
                continue

            value = tags[key]
            if isinstance(value, list):
                value = value[0] if value else ""
            if hasattr(value, "text"):
                value = value.text[0] if isinstance(value.text, list) and value.text else value.text

            value = str(value).strip()
            if value:
                return value

        return ""

    def _extract_length(self, audio: Any) -> timedelta:
        length = getattr(getattr(audio, "info", None), "length", None)
        if length:
            return timedelta(seconds=length)
        return self.default_duration

    def _parse_year(self, value: str) -> int:
        try:
            return int(value[:4])
        except ValueError:
            return current_year()
