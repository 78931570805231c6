"""Logging setup for the CLIENTELE CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr, filtered by the -v/-q verbosity;
- a *flight recorder*: a memory buffer that keeps the most recent DEBUG
  records and writes them to a log file once something goes wrong (a
  WARNING or worse), or on exit when forced.

The startup banner goes through the same handlers, so a flushed log file
always begins with the version and environment it came from.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Sequence
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "clientele"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with their top-level package.

    Sets ``record.prefix`` to e.g. ``"[click_extra]"``, or to ``""`` for
    CLIENTELE's own loggers. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


class FlightRecorder(MemoryHandler):
    """A MemoryHandler writing to a truncated log file when flushed."""

    def __init__(
        self,
        path: Path,
        capacity: int,
        flush_level: int = logging.WARNING,
        flush_on_close: bool = False,
    ) -> None:
        target = logging.FileHandler(path, mode="w", encoding="utf-8")
        target.setLevel(logging.DEBUG)
        target.setFormatter(logging.Formatter(FILE_FORMAT))
        super().__init__(
            capacity=capacity,
            flushLevel=flush_level,
            target=target,
            flushOnClose=flush_on_close,
        )
        self.path = path

    def describe(self) -> str:
        """One-line summary of the recorder's settings."""
        return (
            f"path={self.path}, capacity={self.capacity}, "
            f"flush_on_close={self.flushOnClose}"
        )


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown; ignored in debug mode, which shows everything.
        debug_mode: Add timestamps, logger names and source locations.
        color: False disables styling, mirroring click-extra's ``--no-color``.
    """
    color_system: Literal["auto"] | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> FlightRecorder:
    """Build a flight recorder buffering `capacity` records for `path`.

    The file is opened (and truncated) immediately, so each run starts a
    fresh log.
    """
    return FlightRecorder(
        path, capacity, flush_level=flush_level, flush_on_close=flush_on_close
    )


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: Sequence[logging.Handler],
    logger_levels: dict[str, int],
) -> None:
    """Log the startup banner at INFO and environment diagnostics at DEBUG.

    Args:
        logger: Logger to write to.
        app_version: CLIENTELE's version.
        level: The console level in effect.
        handlers: The root handlers; a `FlightRecorder` among them is described.
        logger_levels: Per-logger level overrides from ``-L``.
    """
    recorders = [h for h in handlers if isinstance(h, FlightRecorder)]
    logger.info(
        "CLIENTELE %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if recorders else "OFF",
    )

    diagnostics = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "Click": version("click"),
        "Rich": version("rich"),
        "Handlers": [type(h).__name__ for h in handlers],
    }
    for label, value in diagnostics.items():
        logger.debug("%s: %s", label, value)
    for recorder in recorders:
        logger.debug("Flight recorder: %s", recorder.describe())
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
