# topmark:header:start
#
#   project      : pgconf
#   file         : __main__.py
#   file_relpath : src/pgconf/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running pgconf via ``python -m pgconf``.

Equivalent to running the ``pgconf`` console script.

Examples:
    Read a parameter::

        python -m pgconf get postgresql.conf port
"""

from __future__ import annotations

from pgconf.cli.main import cli

if __name__ == "__main__":
    cli()
