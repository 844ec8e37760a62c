# topmark:header:start
#
#   project      : pgconf
#   file         : cmd_common.py
#   file_relpath : src/pgconf/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by several commands: resolving the dialect, rendering
typed values and writing an edited document back out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import click

from pgconf.cli.console import ClickConsole
from pgconf.cli.errors import PgconfUsageError
from pgconf.config.io import load_dialect
from pgconf.config.logging import get_logger
from pgconf.core.values import format_float

if TYPE_CHECKING:
    from pathlib import Path

    from pgconf.config.dialect import Dialect
    from pgconf.config.logging import PgconfLogger

logger: PgconfLogger = get_logger(__name__)


class Document(Protocol):
    """Anything that can write its text to a file or stream."""

    def all(self) -> str: ...

    def write_file(self, path: Path, mode: int = ...) -> None: ...


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console set up by the group, or a plain one when invoked standalone."""
    ctx.ensure_object(dict)
    console: ClickConsole | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def resolve_dialect(dialect_file: Path | None, default: Dialect) -> Dialect:
    """Return the dialect loaded from ``dialect_file``, or ``default`` when it is None.

    Raises:
        DialectConfigError: If the file cannot be read or is malformed.
    """
    if dialect_file is None:
        return default
    logger.info("Loading dialect from %s", dialect_file)
    return load_dialect(dialect_file)


def render_value(value: str | int | float | bool) -> str:
    """Render a typed value the way it would be written to a configuration file."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_float(value)
    return str(value)


def check_output_target(output: Path | None, to_stdout: bool) -> None:
    """Reject ``--output`` combined with ``--stdout``."""
    if output is not None and to_stdout:
        raise PgconfUsageError("The '--output' and '--stdout' options are mutually exclusive.")


def emit_document(
    document: Document,
    *,
    source: Path,
    output: Path | None,
    to_stdout: bool,
    console: ClickConsole,
) -> None:
    """Write an edited document to stdout, to ``output``, or back to ``source``.

    Raises:
        ConfIOError: If the file cannot be written.
    """
    if to_stdout:
        console.print(document.all(), nl=False)
        return
    target = output or source
    document.write_file(target)
    logger.info("Wrote %s", target)
