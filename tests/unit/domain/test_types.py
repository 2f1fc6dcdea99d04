import pytest

from playlister.domain.types import AudioExtension


class TestAudioExtension:
    @pytest.mark.parametrize("suffix", [".mp3", ".wav", ".flac", ".ogg", ".m4a", ".MP3", ".Flac"])
    def test__supported(self, suffix: str) -> None:
        assert AudioExtension.is_supported(suffix) is True

    @pytest.mark.parametrize("suffix", ["", ".txt", ".aac", ".mp4", "mp3"])
    def test__unsupported(self, suffix: str) -> None:
        assert AudioExtension.is_supported(suffix) is False
