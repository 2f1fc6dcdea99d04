from pathlib import Path
from typing import Final

TEST_DIR: Final[Path] = Path(__file__).parent
ASSETS_DIR: Final[Path] = TEST_DIR / "assets"
