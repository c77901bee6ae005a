"""Logging setup for STOREFRONT.

`configure_logging` is the single entry point: it attaches a Rich console
handler to the root logger and, optionally, a flight recorder that keeps the
most recent records in memory and writes them to a file once something goes
wrong. `bootstrap` calls it when given a `log_level`.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

from storefront import __version__
from storefront.config import DEFAULT_LOGGER_LEVELS

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "storefront"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with ``[library]``.

    Sets `record.prefix`, which the console format prints in front of the
    message. Storefront records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown; forced to DEBUG in debug mode.
        debug_mode: Show timestamps, logger names and source links instead
            of third-party prefixes.
        color: Disable to get plain text output.
    """
    color_system: ColorSystem | None = "auto" if color else None
    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path, capacity: int = 2000, flush_level: int = logging.WARNING
) -> MemoryHandler:
    """Build a memory handler that dumps its buffer to `path`.

    The buffer holds up to `capacity` records of any level and is written out
    when it fills up or when a record at `flush_level` or above arrives.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=False,
    )


def configure_logging(
    *,
    level: int = logging.WARNING,
    debug_mode: bool = False,
    color: bool = True,
    flight_recorder_path: Path | None = None,
    flight_recorder_capacity: int = 2000,
    logger_levels: Mapping[str, int] | None = None,
) -> list[logging.Handler]:
    """Replace the root logger's handlers with the storefront ones.

    The root logger is opened up to DEBUG and each handler filters on its own
    level, so the flight recorder sees records the console hides. Per-logger
    levels (`config.DEFAULT_LOGGER_LEVELS` unless given) quiet chatty
    libraries.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if flight_recorder_path is not None:
        handlers.append(
            config_flight_recorder(
                flight_recorder_path, capacity=flight_recorder_capacity
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    levels = dict(DEFAULT_LOGGER_LEVELS if logger_levels is None else logger_levels)
    for name, lvl in levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logging.getLogger(PROJECT_PREFIX),
        console_level=logging.DEBUG if debug_mode else level,
        flight_recorder_path=flight_recorder_path,
        logger_levels=levels,
    )
    return handlers


def log_startup(
    logger: logging.Logger,
    *,
    console_level: int,
    flight_recorder_path: Path | None,
    logger_levels: Mapping[str, int],
) -> None:
    """Log a one-line summary at INFO and version details at DEBUG."""
    logger.info(
        "STOREFRONT %s - console=%s, flight-recorder=%s",
        __version__,
        logging.getLevelName(console_level),
        "ON" if flight_recorder_path is not None else "OFF",
    )
    logger.debug(
        "Python %s, SQLAlchemy %s", sys.version.split()[0], sqlalchemy.__version__
    )
    if flight_recorder_path is not None:
        logger.debug("Flight recorder writes to %s", flight_recorder_path)
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
