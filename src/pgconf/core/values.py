# topmark:header:start
#
#   project      : pgconf
#   file         : values.py
#   file_relpath : src/pgconf/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parsing and formatting of typed values.

Parsers take the dequoted column text and raise
[`ParseError`][pgconf.errors.ParseError] when it does not fit the grammar.
Formatters produce unquoted text suitable for
[`ConfEditor.set_raw`][pgconf.core.editor.ConfEditor.set_raw].
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from enum import Enum
from typing import Final

from pgconf.errors import ParseError

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_RE_INT: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


class BoolStyle(str, Enum):
    """Spelling used when writing a boolean value."""

    TRUE_FALSE = "true_false"
    ON_OFF = "on_off"
    YES_NO = "yes_no"

    def render(self, value: bool) -> str:
        """Return ``value`` spelled in this style."""
        true_word, false_word = _BOOL_WORDS[self]
        return true_word if value else false_word


_BOOL_WORDS: Final[dict[BoolStyle, tuple[str, str]]] = {
    BoolStyle.TRUE_FALSE: ("true", "false"),
    BoolStyle.ON_OFF: ("on", "off"),
    BoolStyle.YES_NO: ("yes", "no"),
}

# Checked in this order; the first match wins.
_BOOL_PREFIXES: Final[tuple[tuple[str, bool], ...]] = (
    ("off", False),
    ("true", True),
    ("false", False),
    ("yes", True),
    ("no", False),
)


def parse_bool(text: str) -> bool:
    """Parse a PostgreSQL style boolean.

    Accepts ``on``, ``1`` and ``0`` exactly, and any non-empty prefix of ``off``,
    ``true``, ``false``, ``yes`` or ``no``. Case and surrounding whitespace are ignored.

    Args:
        text (str): Dequoted value.

    Returns:
        bool: The boolean value.

    Raises:
        ParseError: If ``text`` is not a recognized boolean spelling.
    """
    value = text.strip().lower()
    if value == "on":
        return True
    if value:
        for word, result in _BOOL_PREFIXES:
            if word.startswith(value):
                return result
    if value == "1":
        return True
    if value == "0":
        return False
    raise ParseError(text, "bool")


def parse_int(text: str) -> int:
    """Parse an optionally signed decimal integer.

    Raises:
        ParseError: If ``text`` is not a decimal integer.
    """
    value = text.strip()
    if not _RE_INT.fullmatch(value):
        raise ParseError(text, "int")
    return int(value)


def parse_int64(text: str) -> int:
    """Parse a decimal integer that must fit in a signed 64-bit range.

    Raises:
        ParseError: If ``text`` is not a decimal integer or is out of range.
    """
    try:
        result = parse_int(text)
    except ParseError as exc:
        raise ParseError(text, "int64") from exc
    if not INT64_MIN <= result <= INT64_MAX:
        raise ParseError(text, "int64")
    return result


def parse_float(text: str) -> float:
    """Parse a floating point number (``0.5``, ``1e-3``, ``10``, ``inf``).

    Like `parse_int`, only ASCII digits are accepted.

    Raises:
        ParseError: If ``text`` is not a floating point number.
    """
    value = text.strip()
    if not value or not value.isascii() or "_" in value:
        raise ParseError(text, "float")
    try:
        return float(value)
    except ValueError as exc:
        raise ParseError(text, "float") from exc


def format_int(value: int) -> str:
    """Return ``value`` as unquoted decimal text."""
    return str(int(value))


def format_float(value: float) -> str:
    """Return the shortest plain decimal text that reads back as ``value``.

    Exponent notation is never used: ``1e-05`` is written as ``0.00001`` and
    ``10.0`` as ``10``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
