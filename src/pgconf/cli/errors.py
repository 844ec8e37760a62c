# topmark:header:start
#
#   project      : pgconf
#   file         : errors.py
#   file_relpath : src/pgconf/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the pgconf CLI.

Usage:
    Commands wrap library calls in
    [`translate_errors`][pgconf.cli.errors.translate_errors]; any
    [`PgconfError`][pgconf.errors.PgconfError] raised inside is re-raised as the
    matching CLI error with its exit code.

Styling:
    Errors print through the project console when one is present in the Click
    context; otherwise Click's default styling is used.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from pgconf.cli.exit_codes import ExitCode
from pgconf.config.logging import get_logger
from pgconf.errors import (
    AppendError,
    ConfIOError,
    DialectConfigError,
    EmptyArgumentError,
    InvalidColumnError,
    InvalidKeyError,
    KeyNotFoundError,
    ParseError,
    PgconfError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pgconf.config.logging import PgconfLogger

logger: PgconfLogger = get_logger(__name__)


class PgconfCliError(click.ClickException):
    """Base class for all pgconf CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class PgconfUsageError(PgconfCliError):
    """Invalid combination of flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class PgconfKeyNotFoundError(PgconfCliError):
    """The key or rule being looked up does not exist or has no value."""

    exit_code = ExitCode.KEY_NOT_FOUND


class PgconfDataError(PgconfCliError):
    """A value does not parse as the requested type."""

    exit_code = ExitCode.DATA_ERROR


class PgconfFileNotFoundError(PgconfCliError):
    """Input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PgconfPermissionDeniedError(PgconfCliError):
    """Insufficient permissions to read or write a file."""

    exit_code = ExitCode.PERMISSION_DENIED


class PgconfIOError(PgconfCliError):
    """Reading or writing a file failed."""

    exit_code = ExitCode.IO_ERROR


class PgconfConfigError(PgconfCliError):
    """The dialect file is malformed."""

    exit_code = ExitCode.CONFIG_ERROR


class PgconfSoftwareError(PgconfCliError):
    """Internal failure."""

    exit_code = ExitCode.SOFTWARE_ERROR


def cli_error_from(exc: PgconfError) -> PgconfCliError:
    """Return the CLI error matching a library error.

    Args:
        exc (PgconfError): The library error.

    Returns:
        PgconfCliError: An error carrying the same message and a specific exit code.
    """
    message = str(exc)
    if isinstance(exc, KeyNotFoundError):
        return PgconfKeyNotFoundError(message)
    if isinstance(exc, (ParseError, InvalidColumnError, InvalidKeyError, EmptyArgumentError)):
        return PgconfDataError(message)
    if isinstance(exc, DialectConfigError):
        return PgconfConfigError(message)
    if isinstance(exc, AppendError):
        return PgconfSoftwareError(message)
    if isinstance(exc, ConfIOError):
        cause = exc.__cause__
        if isinstance(cause, FileNotFoundError):
            return PgconfFileNotFoundError(message)
        if isinstance(cause, PermissionError):
            return PgconfPermissionDeniedError(message)
        if isinstance(cause, UnicodeError):
            return PgconfDataError(message)
        return PgconfIOError(message)
    return PgconfCliError(message)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise library errors raised in the block as CLI errors."""
    try:
        yield
    except PgconfError as exc:
        logger.debug("Translating %s: %s", type(exc).__name__, exc)
        raise cli_error_from(exc) from exc
