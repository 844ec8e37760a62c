# topmark:header:start
#
#   project      : pgconf
#   file         : options.py
#   file_relpath : src/pgconf/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, dialect file, value
type) and their resolution logic, so commands and the group stay thin.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from pgconf.cli.errors import PgconfUsageError
from pgconf.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


class ValueType(str, Enum):
    """How a value is read from or written to the configuration."""

    RAW = "raw"
    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: The logging level.

    Raises:
        PgconfUsageError: If both flags are used.

    Behavior:
        Three or more ``-v`` select TRACE, two DEBUG, one INFO. ``-q`` selects ERROR.
        The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PgconfUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v INFO, -vv DEBUG, -vvv TRACE).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output.",
    )(f)
    return f


def dialect_file_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--dialect-file`` to a command.

    The option value is a `Path` to a TOML file with a ``[dialect]`` table (or a
    ``pyproject.toml`` with ``[tool.pgconf.dialect]``), or None.
    """
    f = click.option(
        "--dialect-file",
        "dialect_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read the lexical rules from a TOML dialect file.",
    )(f)
    return f


def value_type_option(
    *choices: ValueType, default: ValueType
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Return a decorator adding ``--type`` restricted to ``choices``."""

    def _decorator(f: Callable[P, R]) -> Callable[P, R]:
        return click.option(
            "--type",
            "value_type",
            type=click.Choice([c.value for c in choices]),
            default=default.value,
            show_default=True,
            help="Value type.",
        )(f)

    return _decorator
