from abc import ABC
from abc import abstractmethod
from datetime import timedelta
from pathlib import Path

from playlister.domain.entities.music import Song


class MusicScannerPort(ABC):
    """A port defining the contract for turning audio files into songs."""

    @abstractmethod
    async def scan(self, root: Path) -> list[Song]:
        """Recursively collects songs from every recognized audio file under a folder.

        Args:
            root: The folder to scan.

        Returns:
            A non-empty list of `Song` entities.

        Raises:
            MusicScanError: If the root is not a directory or if no song is found.
        """
        ...

    @abstractmethod
    async def read_song(self, path: Path, duration: timedelta | None = None) -> Song:
        """Builds a song from a single audio file.

        Args:
            path: The audio file to read.
            duration: An explicit duration overriding the one read from the file.

        Returns:
            The `Song` entity built from the file metadata.

        Raises:
            MusicScanError: If the file cannot be read.
        """
        ...
