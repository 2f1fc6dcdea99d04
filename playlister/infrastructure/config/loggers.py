import logging.config
from copy import deepcopy
from typing import Any
from typing import Final

from playlister.infrastructure.types import LogHandler
from playlister.infrastructure.types import LogLevel

LOGGER_PLAYLISTER: Final[str] = "playlister"

# Loggers of third-party libraries that follow our handlers but keep their own level.
THIRD_PARTY_LOGGERS: Final[dict[str, LogLevel]] = {
    "uvicorn": "INFO",
    "uvicorn.error": "INFO",
    "uvicorn.access": "WARNING",
}

default_conf: Final[dict[str, Any]] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "[%(asctime)s] %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "message": {
            "format": "%(message)s",
        },
        "rich": {
            "format": "%(message)s",
            "datefmt": "[%X]",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
        # CLI handlers write on stderr to keep stdout for the command output.
        "cli": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "message",
            "stream": "ext://sys.stderr",
        },
        "cli_alert": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "message",
            "stream": "ext://sys.stderr",
        },
        "rich": {
            "class": "rich.logging.RichHandler",
            "formatter": "rich",
            "level": "NOTSET",
            "markup": False,
            "rich_tracebacks": True,
            "show_level": True,
            "show_path": True,
            "show_time": True,
        },
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "loggers": {
        LOGGER_PLAYLISTER: {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
        **{
            name: {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            }
            for name, level in THIRD_PARTY_LOGGERS.items()
        },
    },
    "root": {
        "level": "WARNING",
        "handlers": ["console"],
    },
}


def configure_loggers(level: LogLevel, handlers: list[LogHandler], propagate: bool = False) -> None:
    """Applies the logging configuration for one of the application entrypoints.

    The level and propagation only change for the `playlister` logger. Handlers
    are shared by every configured logger, root included.

    Args:
        level: The minimum logging level of the application logger (e.g. "INFO").
        handlers: The handler names to use (e.g. ["console"], ["rich"]).
        propagate: Whether application records propagate to the root logger.
    """
    conf = deepcopy(default_conf)

    conf["loggers"][LOGGER_PLAYLISTER]["level"] = level
    conf["loggers"][LOGGER_PLAYLISTER]["propagate"] = propagate

    for logger_conf in conf["loggers"].values():
        logger_conf["handlers"] = list(handlers)
    conf["root"]["handlers"] = list(handlers)

    logging.config.dictConfig(conf)
