import re
from collections.abc import AsyncGenerator
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from contextlib import AbstractContextManager
from contextlib import asynccontextmanager
from contextlib import contextmanager
from typing import Any
from typing import TypeAlias
from unittest import mock

import pytest
from typer.testing import CliRunner

from playlister.application.services.playlist_manager import PlaylistManager

DependencyPatcherFactory: TypeAlias = Callable[..., AbstractContextManager[mock.Mock]]
AsyncDependencyPatcherFactory: TypeAlias = Callable[..., AbstractContextManager[Any]]

TextCleaner: TypeAlias = Callable[[str], str]


@pytest.fixture(autouse=True)
def force_rich_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Force Rich/Typer to use a standard terminal width and no colors
    ONLY for CLI unit tests to ensure consistent output assertions.
    """
    monkeypatch.setenv("COLUMNS", "100")
    monkeypatch.setenv("TERM", "dumb")
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("CI", "true")


@pytest.fixture
def block_cli_configure_loggers() -> Iterable[mock.Mock]:
    """Prevent the CLI 'main' callback from re-configuring logging during tests."""
    with mock.patch("playlister.infrastructure.entrypoints.cli.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
def runner(block_cli_configure_loggers: mock.Mock) -> CliRunner:
    return CliRunner()


@pytest.fixture
def target_path(request: pytest.FixtureRequest) -> str:
    if request.cls and hasattr(request.cls, "TARGET_PATH"):
        return request.cls.TARGET_PATH

    if hasattr(request.module, "TARGET_PATH"):
        return request.module.TARGET_PATH

    raise ValueError("Test class or module must define 'TARGET_PATH' to use auto-patching fixtures.")


# --- Patcher Factories ---


@pytest.fixture
def mock_dependency_factory() -> DependencyPatcherFactory:
    """Factory to patch standard CLI dependencies (repositories, scanners)."""

    @contextmanager
    def _patcher(target_path: str, return_value: Any) -> Iterator[mock.Mock]:
        with mock.patch(target_path, return_value=return_value) as _:
            yield return_value

    return _patcher


@pytest.fixture
def mock_async_context_dependency_factory() -> AsyncDependencyPatcherFactory:
    """Factory to patch async context manager CLI dependencies (playlist manager)."""

    @contextmanager
    def _patcher(target_path: str, dependency_instance: Any) -> Iterator[Any]:
        @asynccontextmanager
        async def _mock_dependency(*args: Any, **kwargs: Any) -> AsyncGenerator[Any]:
            yield dependency_instance

        with mock.patch(target_path, side_effect=_mock_dependency):
            yield dependency_instance

    return _patcher


# --- Dependency Mocks ---


@pytest.fixture
def mock_get_playlist_manager(
    target_path: str,
    playlist_manager: PlaylistManager,
    mock_async_context_dependency_factory: AsyncDependencyPatcherFactory,
) -> Iterable[PlaylistManager]:
    """Patches the loaded playlist manager with one backed by the mocked repository."""
    with mock_async_context_dependency_factory(f"{target_path}.get_playlist_manager", playlist_manager) as manager:
        yield manager


@pytest.fixture
def mock_get_music_scanner(
    target_path: str,
    mock_music_scanner: mock.AsyncMock,
    mock_dependency_factory: DependencyPatcherFactory,
) -> Iterable[mock.AsyncMock]:
    with mock_dependency_factory(f"{target_path}.get_music_scanner", mock_music_scanner) as scanner:
        yield scanner


# --- Helpers ---


@pytest.fixture
def clean_typer_text() -> TextCleaner:
    """
    Typer still creates a rich.console.Console that defaults to a box style for
    errors, whatever the environment variables say. Clean up the output instead
    of coupling the tests to specific terminal emulation settings.
    """

    def _cleaner(text: str) -> str:
        clean_text = re.sub(r"[│╭╰─╮╯]", "", text)
        return " ".join(clean_text.split())

    return _cleaner
