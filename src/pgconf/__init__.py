# topmark:header:start
#
#   project      : pgconf
#   file         : __init__.py
#   file_relpath : src/pgconf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pgconf package.

pgconf reads and edits ``postgresql.conf`` and ``pg_hba.conf`` style files in
place. Values are looked up by key, read as strings, integers, floats or
booleans, and written back without touching the surrounding whitespace,
comments or unrelated lines.
"""

from __future__ import annotations

from pgconf.config.dialect import GENERIC, HBA, POSTGRESQL, Dialect, DialectName, preset
from pgconf.config.io import dialect_from_toml, load_dialect
from pgconf.constants import PGCONF_VERSION
from pgconf.core.editor import ConfEditor
from pgconf.core.row import Row, Token
from pgconf.core.tokenizer import parse_line
from pgconf.core.values import BoolStyle
from pgconf.errors import (
    AppendError,
    ConfIOError,
    DialectConfigError,
    EmptyArgumentError,
    EmptyLineError,
    InvalidColumnError,
    InvalidKeyError,
    InvalidTokenError,
    KeyNotFoundError,
    KeyWithoutValueError,
    ParseError,
    PgconfError,
)
from pgconf.hba import HbaColumn, HbaConf
from pgconf.postgresql import PostgresqlConf

__version__ = PGCONF_VERSION

__all__ = [
    "GENERIC",
    "HBA",
    "POSTGRESQL",
    "AppendError",
    "BoolStyle",
    "ConfEditor",
    "ConfIOError",
    "Dialect",
    "DialectConfigError",
    "DialectName",
    "EmptyArgumentError",
    "EmptyLineError",
    "HbaColumn",
    "HbaConf",
    "InvalidColumnError",
    "InvalidKeyError",
    "InvalidTokenError",
    "KeyNotFoundError",
    "KeyWithoutValueError",
    "ParseError",
    "PgconfError",
    "PostgresqlConf",
    "Row",
    "Token",
    "dialect_from_toml",
    "load_dialect",
    "parse_line",
    "preset",
]
