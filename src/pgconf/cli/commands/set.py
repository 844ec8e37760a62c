# topmark:header:start
#
#   project      : pgconf
#   file         : set.py
#   file_relpath : src/pgconf/cli/commands/set.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pgconf ``set`` command.

Sets one ``postgresql.conf`` parameter, appending it when absent. Only the
value's characters change; comments and spacing stay as they are.

Examples:
  Set a string value (written in single quotes):

    $ pgconf set postgresql.conf listen_addresses '*'

  Set a number, writing the result elsewhere:

    $ pgconf set --type int --output new.conf postgresql.conf port 5433

  Preview a boolean change:

    $ pgconf set --type bool --bool-style on_off --stdout postgresql.conf fsync yes
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
from pgconf.cli.options import ValueType, dialect_file_option, value_type_option
from pgconf.config.dialect import POSTGRESQL
from pgconf.config.logging import get_logger
from pgconf.core.values import BoolStyle, parse_bool, parse_float, parse_int64
from pgconf.postgresql import PostgresqlConf

logger = get_logger(__name__)


@click.command(
    name="set",
    help="Set KEY to VALUE in a postgresql.conf style FILE.",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("key")
@click.argument("value")
@value_type_option(
    ValueType.RAW,
    ValueType.STR,
    ValueType.INT,
    ValueType.FLOAT,
    ValueType.BOOL,
    default=ValueType.STR,
)
@click.option(
    "--bool-style",
    "bool_style",
    type=click.Choice([s.value for s in BoolStyle]),
    default=BoolStyle.ON_OFF.value,
    show_default=True,
    help="Spelling of boolean values (with --type bool).",
)
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
def set_command(
    *,
    file: Path,
    key: str,
    value: str,
    value_type: str,
    bool_style: str,
    output: Path | None,
    to_stdout: bool,
    dialect_file: Path | None,
) -> None:
    """Set ``key`` to ``value`` and write the document.

    Args:
        file (Path): The configuration file.
        key (str): Parameter name, matched case-insensitively.
        value (str): New value, parsed according to ``value_type``.
        value_type (str): How to interpret and write ``value``.
        bool_style (str): Boolean spelling for ``--type bool``.
        output (Path | None): Alternative destination file.
        to_stdout (bool): Print the document instead of writing it.
        dialect_file (Path | None): Optional TOML dialect definition.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    check_output_target(output, to_stdout)

    vtype = ValueType(value_type)
    with translate_errors():
        conf = PostgresqlConf.open(file, resolve_dialect(dialect_file, POSTGRESQL))
        if vtype is ValueType.RAW:
            conf.set_raw(key, value)
        elif vtype is ValueType.INT:
            conf.set_int64(key, parse_int64(value))
        elif vtype is ValueType.FLOAT:
            conf.set_float64(key, parse_float(value))
        elif vtype is ValueType.BOOL:
            flag = parse_bool(value)
            style = BoolStyle(bool_style)
            if style is BoolStyle.ON_OFF:
                conf.set_on_off(key, flag)
            elif style is BoolStyle.YES_NO:
                conf.set_yes_no(key, flag)
            else:
                conf.set_true_false(key, flag)
        else:
            conf.set_string(key, value)
        logger.info("Set %s (%s)", key, vtype.value)
        emit_document(conf, source=file, output=output, to_stdout=to_stdout, console=console)
