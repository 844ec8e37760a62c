# topmark:header:start
#
#   project      : pgconf
#   file         : version.py
#   file_relpath : src/pgconf/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pgconf ``version`` command.

Prints the pgconf version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from pgconf.cli.cmd_common import get_console
from pgconf.constants import PGCONF_VERSION


@click.command(
    name="version",
    help="Show the current version of pgconf.",
)
def version_command() -> None:
    """Show the current version of pgconf."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    console.print(console.styled(PGCONF_VERSION, bold=True))
