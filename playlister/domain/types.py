from enum import StrEnum


class AudioExtension(StrEnum):
    """Enumeration of audio file extensions recognized by the scanner."""

    MP3 = ".mp3"
    WAV = ".wav"
    FLAC = ".flac"
    OGG = ".ogg"
    M4A = ".m4a"

    @classmethod
    def is_supported(cls, suffix: str) -> bool:
        return suffix.lower() in {extension.value for extension in cls}
