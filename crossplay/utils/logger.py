"""Logging for the crossword player.

The player draws the board on stdout, so log records go to stderr and hang
off the ``crossplay`` package logger rather than the root logger. Embedding
applications keep control of their own root configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

PACKAGE_LOGGER = "crossplay"
DEFAULT_LEVEL = logging.WARNING
# Third-party loggers that chatter at INFO while a puzzle is fetched.
NOISY_LOGGERS = ("urllib3", "requests")

_HANDLER_ATTR = "_crossplay_handler"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        return resolved
    return level


def configure_logging(level: Union[int, str] = DEFAULT_LEVEL, stream: Optional[IO[str]] = None) -> logging.Handler:
    """Send ``crossplay`` records to ``stream`` (stderr by default) at ``level``.

    Calling again replaces the handler installed by the previous call. HTTP
    client loggers stay at WARNING unless DEBUG is requested.
    """

    resolved = _resolve_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    setattr(handler, _HANDLER_ATTR, True)

    package = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in package.handlers if getattr(h, _HANDLER_ATTR, False)]:
        package.removeHandler(old)
    package.addHandler(handler)
    package.setLevel(resolved)
    package.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if resolved <= logging.DEBUG else logging.WARNING)
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``crossplay`` namespace, configuring defaults if needed."""

    if not name:
        name = PACKAGE_LOGGER
    elif name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(name)
