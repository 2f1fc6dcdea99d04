import logging
from collections.abc import Iterable
from datetime import UTC
from datetime import datetime

import pytest
from time_machine import TimeMachineFixture


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "slow: mark test as slow (not executed by default)")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    skip_slow = pytest.mark.skip(reason="need --slow option to run")

    for item in items:
        if item.get_closest_marker("slow") and not config.getoption("--slow"):
            item.add_marker(skip_slow)


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Iterable[None]:
    """Configure logging for ALL tests before anything else"""
    from playlister.infrastructure.config.loggers import configure_loggers

    # Records still reach caplog through the root logger.
    configure_loggers(level="DEBUG", handlers=["null"], propagate=True)

    yield

    logging.shutdown()


@pytest.fixture
def frozen_time(time_machine: TimeMachineFixture) -> datetime:
    fixed_dt = datetime(2026, 1, 1, tzinfo=UTC)
    time_machine.move_to(fixed_dt, tick=False)
    return fixed_dt
