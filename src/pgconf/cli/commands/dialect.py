# topmark:header:start
#
#   project      : pgconf
#   file         : dialect.py
#   file_relpath : src/pgconf/cli/commands/dialect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pgconf ``dialect`` command.

Prints a dialect as TOML. The output is a valid ``--dialect-file``, so it is a
convenient starting point for a custom dialect:

    $ pgconf dialect postgresql > my-dialect.toml
"""

from __future__ import annotations

from pathlib import Path

import click

from pgconf.cli.cmd_common import get_console, resolve_dialect
from pgconf.cli.errors import translate_errors
from pgconf.cli.options import dialect_file_option
from pgconf.config.dialect import DialectName
from pgconf.config.io import dialect_to_toml


@click.command(
    name="dialect",
    help="Print the NAME preset (or the --dialect-file dialect) as TOML.",
)
@click.argument(
    "name",
    type=click.Choice([n.value for n in DialectName]),
    default=DialectName.POSTGRESQL.value,
)
@dialect_file_option
def dialect_command(*, name: str, dialect_file: Path | None) -> None:
    """Print a dialect definition."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    with translate_errors():
        dialect = resolve_dialect(dialect_file, DialectName(name).dialect)
    console.print(dialect_to_toml(dialect), nl=False)
