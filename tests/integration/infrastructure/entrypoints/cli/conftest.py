from collections.abc import Iterable
from pathlib import Path
from unittest import mock

import pytest
from typer.testing import CliRunner

from playlister.infrastructure.config.settings.app import app_settings


@pytest.fixture(autouse=True)
def force_rich_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMNS", "100")
    monkeypatch.setenv("TERM", "dumb")
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture(autouse=True)
def cli_data_file(data_file: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Points the CLI storage to the temporary data file."""
    monkeypatch.setattr(app_settings, "DATA_FILE", data_file)
    return data_file


@pytest.fixture
def runner() -> Iterable[CliRunner]:
    with mock.patch("playlister.infrastructure.entrypoints.cli.main.configure_loggers"):
        yield CliRunner()
