"""Logging setup: SUCCESS / FAILURE levels and the record format."""

from __future__ import annotations

import logging
from pathlib import Path

SUCCESS = 25
FAILURE = 35

logging.addLevelName(SUCCESS, "SUCCESS")
logging.addLevelName(FAILURE, "FAILURE")

LOG_FORMAT = "[%(asctime)s.%(msecs)03d] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "chronoq"

# Handlers installed by configure_logging; others on the logger are left alone.
_installed: list[logging.Handler] = []


def installed_handlers() -> list[logging.Handler]:
    return list(_installed)


def clear_handlers() -> None:
    """Detach and close the handlers installed by ``configure_logging``."""
    root = logging.getLogger(LOGGER_NAME)
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()


def configure_logging(level: int | str = "INFO", log_file: str | Path | None = None) -> logging.Logger:
    """Attach stream (and optional file) handlers to the ``chronoq`` logger.

    Calling again replaces the handlers installed by a previous call.
    """
    clear_handlers()
    root = logging.getLogger(LOGGER_NAME)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _installed.append(handler)

    root.setLevel(level.upper() if isinstance(level, str) else level)
    root.propagate = False
    return root
