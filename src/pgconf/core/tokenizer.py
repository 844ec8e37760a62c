# topmark:header:start
#
#   project      : pgconf
#   file         : tokenizer.py
#   file_relpath : src/pgconf/core/tokenizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass line tokenizer.

[`parse_line`][pgconf.core.tokenizer.parse_line] walks a line one character at
a time and records where each column value starts and ends. Quoting only
affects where a column ends: quote characters stay part of the span and
malformed quoting (unterminated, mismatched) is never an error.

Scanning stops at the first ``\\n`` or inline comment character. Unless the
dialect enables ``quote_aware_comments``, the comment character ends the line
even inside an open quote:

    >>> from pgconf.config.dialect import POSTGRESQL
    >>> row = parse_line("a = 'x#y'\\n", 0, POSTGRESQL)
    >>> [(t.start, t.end) for t in row]
    [(0, 1), (4, 6)]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pgconf.config.logging import get_logger
from pgconf.constants import EOL, UNSET
from pgconf.core.row import Row
from pgconf.errors import EmptyLineError

if TYPE_CHECKING:
    from pgconf.config.dialect import Dialect
    from pgconf.config.logging import PgconfLogger

logger: PgconfLogger = get_logger(__name__)

_BACKSLASH = "\\"


def parse_line(line: str, offset: int, dialect: Dialect) -> Row:
    """Split ``line`` into column spans.

    Args:
        line (str): The line to scan. A trailing ``\\n`` and anything after it is ignored.
        offset (int): Buffer offset of the line's first character; added to every span.
        dialect (Dialect): Whitespace, quote, escaping and comment rules.

    Returns:
        Row: One token per column, in order. Tokens include quote characters and exclude
        the surrounding whitespace.

    Raises:
        EmptyLineError: If the line holds no column (blank or comment only).
    """
    row = Row()

    pos: int = UNSET
    start: int = UNSET
    inside_quote: bool = False
    # Any dialect quote may open a value; only the opening one may close it.
    expected_quotes: str = dialect.quotes
    last_char: str = ""

    for i, ch in enumerate(line):
        if ch == EOL:
            break
        if ch == dialect.inline_comment and not (dialect.quote_aware_comments and inside_quote):
            break

        pos = offset + i
        is_whitespace: bool = ch in dialect.whitespace
        is_quote: bool = ch in expected_quotes

        if start != UNSET:
            escaped: bool = dialect.backslash_escaped_quotes and last_char == _BACKSLASH
            if is_quote and not escaped:
                inside_quote = not inside_quote
                expected_quotes = ch if inside_quote else dialect.quotes
            if is_whitespace and not inside_quote:
                row.add_token(start, pos)
                start = UNSET
        else:
            if is_whitespace:
                continue
            start = pos
            if is_quote:
                inside_quote = True
                expected_quotes = ch

        last_char = ch

    if start != UNSET:
        row.add_token(start, pos + 1)

    if row.col_count == 0:
        raise EmptyLineError(offset)

    logger.trace(
        "Line at %d: %d column(s) %s",
        offset,
        row.col_count,
        [(t.start, t.end) for t in row.tokens],
    )
    return row
