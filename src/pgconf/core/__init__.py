# topmark:header:start
#
#   project      : pgconf
#   file         : __init__.py
#   file_relpath : src/pgconf/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dialect-independent tokenizer, row model and buffer editor."""

from __future__ import annotations

from pgconf.core.editor import ConfEditor
from pgconf.core.row import Row, Token
from pgconf.core.tokenizer import parse_line
from pgconf.core.values import BoolStyle, format_float, parse_bool, parse_float, parse_int

__all__ = [
    "BoolStyle",
    "ConfEditor",
    "Row",
    "Token",
    "format_float",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_line",
]
