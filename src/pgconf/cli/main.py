# topmark:header:start
#
#   project      : pgconf
#   file         : main.py
#   file_relpath : src/pgconf/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``pgconf`` command.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the console; subcommands pick them up from there.
"""

from __future__ import annotations

import click

from pgconf.cli.commands.dialect import dialect_command
from pgconf.cli.commands.get import get_command
from pgconf.cli.commands.hba import hba_add_command, hba_command
from pgconf.cli.commands.set import set_command
from pgconf.cli.commands.version import version_command
from pgconf.cli.console import ClickConsole
from pgconf.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from pgconf.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize logging and the console on the Click context.

    Explicit ``-v``/``-q`` flags win over ``PGCONF_LOG_LEVEL``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    level = resolve_verbosity(verbose, quiet)
    if not verbose and not quiet:
        level = resolve_env_log_level() or level
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.color = not no_color
    ctx.obj["color_enabled"] = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Read and edit postgresql.conf and pg_hba.conf files in place.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the pgconf CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(get_command)

cli.add_command(set_command)

cli.add_command(hba_command)

cli.add_command(hba_add_command)

cli.add_command(dialect_command)

if __name__ == "__main__":
    cli()
