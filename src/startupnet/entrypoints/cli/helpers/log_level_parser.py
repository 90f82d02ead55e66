"""Parsing of ``-L NAME=LEVEL`` logger-level options.

Values may be repeated on the command line or given as one comma/space
separated list (``STARTUPNET_LOGGER_LEVELS="sqlalchemy.engine=INFO alembic=ERROR"``).
Unknown level names are rejected with `click.BadParameter`.
"""

import logging
import re

import click

# quiet by default; -L overrides per name
DEFAULT_LIB_LEVELS = {
    "sqlalchemy": logging.WARNING,
    "alembic": logging.WARNING,
}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten one string or a sequence of strings into NAME=LEVEL items."""
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _to_level(item: str, level_name: str) -> int:
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level in {item!r}: {level_name!r}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a ``{name: level}`` mapping.

    `DEFAULT_LIB_LEVELS` is the starting point; later items win over earlier
    ones for the same logger name.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL, the name is empty,
            or LEVEL is not a standard logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _to_level(item, level_name)
    return levels
