class PlaylistNotFound(Exception):
    pass


class SongNotFound(Exception):
    pass


class StorageError(Exception):
    """Raised when the playlist collection cannot be read from or written to its storage."""

    pass


class MusicScanError(Exception):
    """Raised when a music folder or file cannot be turned into songs."""

    pass
