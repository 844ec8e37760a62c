# topmark:header:start
#
#   project      : pgconf
#   file         : __init__.py
#   file_relpath : src/pgconf/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``pgconf`` CLI."""
