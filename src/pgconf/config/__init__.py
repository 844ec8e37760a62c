# topmark:header:start
#
#   project      : pgconf
#   file         : __init__.py
#   file_relpath : src/pgconf/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dialect configuration and logging setup for pgconf."""

from __future__ import annotations

from pgconf.config.dialect import GENERIC, HBA, POSTGRESQL, Dialect, DialectName, preset
from pgconf.config.io import dialect_from_table, dialect_from_toml, dialect_to_toml, load_dialect

__all__ = [
    "GENERIC",
    "HBA",
    "POSTGRESQL",
    "Dialect",
    "DialectName",
    "dialect_from_table",
    "dialect_from_toml",
    "dialect_to_toml",
    "load_dialect",
    "preset",
]
