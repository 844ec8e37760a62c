# topmark:header:start
#
#   project      : pgconf
#   file         : __init__.py
#   file_relpath : src/pgconf/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for pgconf.

The CLI is a thin `click` layer over
[`PostgresqlConf`][pgconf.postgresql.PostgresqlConf] and
[`HbaConf`][pgconf.hba.HbaConf]. Library exceptions are translated to
[`PgconfCliError`][pgconf.cli.errors.PgconfCliError] subclasses that carry a
sysexits-aligned exit code.
"""
