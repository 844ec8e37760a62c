# topmark:header:start
#
#   project      : pgconf
#   file         : get.py
#   file_relpath : src/pgconf/cli/commands/get.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pgconf ``get`` command.

Prints the value of one ``postgresql.conf`` parameter.

Examples:
  Print a string value without its quotes:

    $ pgconf get postgresql.conf log_destination
    syslog

  Print the value as written:

    $ pgconf get --raw postgresql.conf log_destination
    'syslog'

  Parse the value as a boolean (``yes``, ``on``, ``t`` all read as true):

    $ pgconf get --type bool postgresql.conf log_connections
    true
"""

from __future__ import annotations

from pathlib import Path

import click

from pgconf.cli.cmd_common import get_console, render_value, resolve_dialect
from pgconf.cli.errors import PgconfUsageError, translate_errors
from pgconf.cli.options import ValueType, dialect_file_option, value_type_option
from pgconf.config.dialect import POSTGRESQL
from pgconf.postgresql import PostgresqlConf


@click.command(
    name="get",
    help="Print the value of KEY from a postgresql.conf style FILE.",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("key")
@click.option(
    "--raw", is_flag=True, default=False, help="Print the value as written, quotes included."
)
@value_type_option(
    ValueType.STR, ValueType.INT, ValueType.FLOAT, ValueType.BOOL, default=ValueType.STR
)
@dialect_file_option
def get_command(
    *,
    file: Path,
    key: str,
    raw: bool,
    value_type: str,
    dialect_file: Path | None,
) -> None:
    """Print the value of ``key``.

    Args:
        file (Path): The configuration file.
        key (str): Parameter name, matched case-insensitively.
        raw (bool): Print the value exactly as written.
        value_type (str): Type to parse the value as.
        dialect_file (Path | None): Optional TOML dialect definition.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    vtype = ValueType(value_type)
    if raw and vtype is not ValueType.STR:
        raise PgconfUsageError("The '--raw' and '--type' options are mutually exclusive.")

    with translate_errors():
        conf = PostgresqlConf.open(file, resolve_dialect(dialect_file, POSTGRESQL))
        value: str | int | float | bool
        if raw:
            value = conf.get_raw(key)
        elif vtype is ValueType.INT:
            value = conf.get_int64(key)
        elif vtype is ValueType.FLOAT:
            value = conf.get_float64(key)
        elif vtype is ValueType.BOOL:
            value = conf.get_bool(key)
        else:
            value = conf.get_string(key)

    console.print(render_value(value))
