# topmark:header:start
#
#   project      : pgconf
#   file         : hba.py
#   file_relpath : src/pgconf/cli/commands/hba.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pgconf ``hba`` and ``hba-add`` commands.

``hba`` lists the ``pg_hba.conf`` rules whose column matches a value;
``hba-add`` appends a rule.

Examples:
  Show the addresses allowed to replicate:

    $ pgconf hba pg_hba.conf --column database replication
    127.0.0.1/32
    ::1/128

  Show whole rules:

    $ pgconf hba pg_hba.conf --column conn_type host --show all

  Append a rule:

    $ pgconf hba-add pg_hba.conf host all all 10.0.0.0/8 scram-sha-256
"""

from __future__ import annotations

from pathlib import Path

import click

from pgconf.cli.cmd_common import (
    check_output_target,
    emit_document,
    get_console,
    resolve_dialect,
)
from pgconf.cli.errors import translate_errors
from pgconf.cli.options import dialect_file_option
from pgconf.config.dialect import HBA
from pgconf.hba import HbaColumn, HbaConf

_COLUMN_CHOICES = [c.name.lower() for c in HbaColumn]
_SHOW_ALL = "all"


@click.command(
    name="hba",
    help="List the rules of a pg_hba.conf style FILE whose COLUMN equals VALUE.",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("value")
@click.option(
    "--column",
    "column",
    type=click.Choice(_COLUMN_CHOICES),
    default=HbaColumn.CONN_TYPE.name.lower(),
    show_default=True,
    help="Column to match (case-insensitive).",
)
@click.option(
    "--show",
    "show",
    type=click.Choice([*_COLUMN_CHOICES, _SHOW_ALL]),
    default=HbaColumn.ADDRESS.name.lower(),
    show_default=True,
    help="Column to print for each matching rule, or 'all' for the whole rule.",
)
@dialect_file_option
def hba_command(
    *,
    file: Path,
    value: str,
    column: str,
    show: str,
    dialect_file: Path | None,
) -> None:
    """Print one line per matching rule.

    Args:
        file (Path): The ``pg_hba.conf`` file.
        value (str): Value to match.
        column (str): Name of the column to match.
        show (str): Name of the column to print, or ``all``.
        dialect_file (Path | None): Optional TOML dialect definition.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    with translate_errors():
        hba = HbaConf.open(file, resolve_dialect(dialect_file, HBA))
        rows = hba.lookup_all(HbaColumn[column.upper()], value)
        for row in rows:
            if show == _SHOW_ALL:
                console.print("\t".join(hba.columns(row)))
                continue
            col = HbaColumn[show.upper()]
            # rules shorter than the shown column print an empty line
            console.print(hba.get_column(row, col) if row.has_column(col) else "")


@click.command(
    name="hba-add",
    help="Append a rule to a pg_hba.conf style FILE.",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("conn_type")
@click.argument("database")
@click.argument("user")
@click.argument("address")
@click.argument("method")
@click.option(
    "--output",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the result to this file instead of FILE.",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    default=False,
    help="Print the result instead of writing a file.",
)
@dialect_file_option
def hba_add_command(
    *,
    file: Path,
    conn_type: str,
    database: str,
    user: str,
    address: str,
    method: str,
    output: Path | None,
    to_stdout: bool,
    dialect_file: Path | None,
) -> None:
    """Append a rule and write the document."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    check_output_target(output, to_stdout)

    with translate_errors():
        hba = HbaConf.open(file, resolve_dialect(dialect_file, HBA))
        hba.append_entry(conn_type, database, user, address, method)
        emit_document(hba, source=file, output=output, to_stdout=to_stdout, console=console)
