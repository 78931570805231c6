"""Parsing of the ``-L/--logger-level NAME=LEVEL`` CLI option.

Values may be repeated on the command line or given as one comma/space
separated list (e.g. from ``CLIENTELE_LOGGER_LEVELS``). The result always
starts from `DEFAULT_LIB_LEVELS`, so noisy libraries stay quiet unless
explicitly raised.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING, "markdown_it": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten option values into individual NAME=LEVEL items.

    Args:
        value: A single string or the tuple Click passes for repeatable options.

    Returns:
        list[str]: Non-empty items in the order given.
    """
    raw = [value] if isinstance(value, str) else list(value)
    return [item for chunk in raw for item in _SEPARATORS.split(chunk) if item]


def to_level(level_name: str) -> int:
    """Convert a level name such as ``"info"`` to its numeric value.

    Raises:
        click.BadParameter: If `level_name` is not a standard logging level.
    """
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return level


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a logger-name → level map.

    Later items win over earlier ones and over `DEFAULT_LIB_LEVELS`.

    Raises:
        click.BadParameter: If an item has no ``=``, an empty name, or an
            unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = to_level(level_name)
    return levels
