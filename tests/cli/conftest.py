# topmark:header:start
#
#   project      : pgconf
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

`run_cli` invokes the Click group in-process with `CliRunner`. Every CLI run
reconfigures logging for the runner's streams, so an autouse fixture puts the
session's TRACE setup back afterwards.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from pgconf.cli.exit_codes import ExitCode
from pgconf.cli.main import cli
from pgconf.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_session_logging() -> Iterator[None]:
    """Reinstall the session logging setup after each CLI test."""
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI and return the Click result.

    Color is disabled so output can be compared literally.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, without ``--no-color``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    args: list[str] = ["--no-color"]
    if isinstance(argv, str):
        args.append(argv)
    elif argv is not None:
        args.extend(argv)
    runner = CliRunner()
    return runner.invoke(cli, args, input=input_text)


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert the exit code and include the output in the failure message."""
    assert result.exit_code == code, (
        f"expected {code.name} ({int(code)}), got {result.exit_code}\n"
        f"output:\n{result.output}\nexception: {result.exception!r}"
    )


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert a clean exit."""
    assert_exit(result, ExitCode.SUCCESS)


def write_text(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` without newline translation and return the path."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)
    return path


def read_text(path: Path) -> str:
    """Read ``path`` without newline translation."""
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()
