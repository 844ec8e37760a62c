# topmark:header:start
#
#   project      : pgconf
#   file         : dialect.py
#   file_relpath : src/pgconf/config/dialect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lexical rules of a configuration file format.

A [`Dialect`][pgconf.config.dialect.Dialect] is plain data: the tokenizer and
the editor read it, nothing mutates it. Three presets are provided:

- `GENERIC`: whitespace separated columns, tab delimited on append.
- `POSTGRESQL`: ``postgresql.conf``; ``=`` counts as whitespace and string
  values are always written in single quotes.
- `HBA`: ``pg_hba.conf``; same rules as `GENERIC`.

Use [`Dialect.replace`][pgconf.config.dialect.Dialect.replace] to derive a
variant, or [`pgconf.config.io.load_dialect`][pgconf.config.io.load_dialect] to
read one from TOML.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pgconf.errors import DialectConfigError


@dataclass(frozen=True, slots=True)
class Dialect:
    """Immutable set of lexical rules shared by the tokenizer and the editor.

    Attributes:
        whitespace (str): Characters that separate columns.
        default_delimiter (str): Text inserted between columns when appending a row.
        quotes (str): Characters that can open and close a quoted value.
        backslash_escaped_quotes (bool): Whether ``\\'`` or ``\\"`` inside a quoted value is
            a literal quote rather than the closing quote.
        default_quote (str): Quote character used when quoting values on write.
        inline_comment (str): Character that starts a comment running to the end of the line.
        always_quote_strings (bool): Quote string values on write even if they contain no
            quote or whitespace characters.
        quote_aware_comments (bool): Treat the comment character as data while a quote is
            open. Off by default, which makes ``#`` end the line even inside quotes.
    """

    whitespace: str = " \t\r"
    default_delimiter: str = "\t"
    quotes: str = "\"'"
    backslash_escaped_quotes: bool = True
    default_quote: str = '"'
    inline_comment: str = "#"
    always_quote_strings: bool = False
    quote_aware_comments: bool = False

    def __post_init__(self) -> None:
        if len(self.default_quote) != 1:
            raise DialectConfigError(
                f"default_quote must be a single character, got {self.default_quote!r}"
            )
        if len(self.inline_comment) != 1:
            raise DialectConfigError(
                f"inline_comment must be a single character, got {self.inline_comment!r}"
            )
        if not self.quotes:
            raise DialectConfigError("quotes must contain at least one character")
        if self.default_quote not in self.quotes:
            raise DialectConfigError(
                f"default_quote {self.default_quote!r} is not one of quotes {self.quotes!r}"
            )

    def is_whitespace(self, ch: str) -> bool:
        """Return True if ``ch`` separates columns."""
        return ch in self.whitespace

    def is_quote(self, ch: str) -> bool:
        """Return True if ``ch`` is one of the recognized quote characters."""
        return ch in self.quotes

    def replace(self, **changes: Any) -> Dialect:
        """Return a copy of this dialect with ``changes`` applied.

        Args:
            **changes (Any): Field values to override.

        Returns:
            Dialect: The derived dialect.

        Raises:
            DialectConfigError: If a field name is unknown.
        """
        try:
            return dataclasses.replace(self, **changes)
        except TypeError as exc:
            raise DialectConfigError(str(exc)) from exc


GENERIC = Dialect()

POSTGRESQL = Dialect(
    whitespace=" \t\r=",
    default_delimiter=" = ",
    quotes="\"'",
    backslash_escaped_quotes=True,
    default_quote="'",
    inline_comment="#",
    always_quote_strings=True,
)

HBA = Dialect(
    whitespace=" \t\r",
    default_delimiter="\t",
    quotes="\"'",
    backslash_escaped_quotes=True,
    default_quote='"',
    inline_comment="#",
    always_quote_strings=False,
)


class DialectName(str, Enum):
    """Names of the built-in dialect presets."""

    GENERIC = "generic"
    POSTGRESQL = "postgresql"
    HBA = "hba"

    @property
    def dialect(self) -> Dialect:
        """Return the preset registered under this name."""
        return PRESETS[self]


PRESETS: dict[DialectName, Dialect] = {
    DialectName.GENERIC: GENERIC,
    DialectName.POSTGRESQL: POSTGRESQL,
    DialectName.HBA: HBA,
}


def preset(name: str) -> Dialect:
    """Return the built-in dialect called ``name``.

    Args:
        name (str): One of ``generic``, ``postgresql`` or ``hba`` (case-insensitive).

    Returns:
        Dialect: The preset.

    Raises:
        DialectConfigError: If no preset has that name.
    """
    try:
        return DialectName(name.strip().lower()).dialect
    except ValueError as exc:
        choices = ", ".join(n.value for n in DialectName)
        raise DialectConfigError(f"unknown dialect {name!r} (expected one of: {choices})") from exc
