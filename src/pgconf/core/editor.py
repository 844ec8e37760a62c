# topmark:header:start
#
#   project      : pgconf
#   file         : editor.py
#   file_relpath : src/pgconf/core/editor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic editor for multi-column, whitespace delimited configuration text.

[`ConfEditor`][pgconf.core.editor.ConfEditor] owns the whole document as one
string. Lookups tokenize the buffer line by line and hand back
[`Row`][pgconf.core.row.Row] objects whose tokens point into that string.
Writes splice the new value over exactly one token, so indentation, the
spacing between columns and trailing comments survive every edit.

Rows go stale: a splice that changes the buffer length shifts everything
after it. Look a row up again before editing past an earlier edit.

Example:
    ```python
    editor = ConfEditor.open(Path("pg_hba.conf"), HBA)
    row, _ = editor.lookup_row(1, "replication", ignore_case=True)
    editor.set_string(row, 3, "10.0.0.0/8")
    editor.write_file(Path("pg_hba.conf"))
    ```
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING

from pgconf.config.dialect import GENERIC
from pgconf.config.logging import get_logger
from pgconf.constants import DEFAULT_FILE_MODE, EOL
from pgconf.core.tokenizer import parse_line
from pgconf.core.values import (
    BoolStyle,
    format_float,
    format_int,
    parse_bool,
    parse_float,
    parse_int,
    parse_int64,
)
from pgconf.errors import (
    AppendError,
    ConfIOError,
    EmptyLineError,
    InvalidTokenError,
    KeyNotFoundError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from pgconf.config.dialect import Dialect
    from pgconf.config.logging import PgconfLogger
    from pgconf.core.row import Row

logger: PgconfLogger = get_logger(__name__)


class ConfEditor:
    """Read and edit column values in place while preserving whitespace and comments.

    Args:
        text (str): The configuration document.
        dialect (Dialect): Lexical rules used for tokenizing and quoting.
    """

    def __init__(self, text: str = "", dialect: Dialect = GENERIC) -> None:
        self._buffer: str = text
        self._dialect: Dialect = dialect

    # ---- Loading and saving --------------------------------------------------

    @classmethod
    def open(cls, path: Path, dialect: Dialect = GENERIC) -> ConfEditor:
        """Read the configuration from a file.

        Raises:
            ConfIOError: If the file cannot be read or decoded.
        """
        try:
            with open(path, encoding="utf-8", newline="") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfIOError(f"could not read file {path}: {exc}") from exc
        logger.debug("Read %d character(s) from %s", len(text), path)
        return cls(text, dialect)

    @classmethod
    def open_stream(cls, stream: IO[str], dialect: Dialect = GENERIC) -> ConfEditor:
        """Read the configuration from a text stream until EOF.

        Raises:
            ConfIOError: If reading from the stream fails.
        """
        try:
            text = stream.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfIOError(f"could not read configuration from stream: {exc}") from exc
        return cls(text, dialect)

    def all(self) -> str:
        """Return the whole configuration."""
        return self._buffer

    def __str__(self) -> str:
        return self._buffer

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self._buffer)} chars>, {self._dialect!r})"

    def write_to(self, stream: IO[str]) -> int:
        """Write the whole configuration to a text stream.

        Returns:
            int: Number of characters written.

        Raises:
            ConfIOError: If writing fails.
        """
        try:
            stream.write(self._buffer)
        except OSError as exc:
            raise ConfIOError(f"could not write configuration to stream: {exc}") from exc
        return len(self._buffer)

    def write_file(self, path: Path, mode: int = DEFAULT_FILE_MODE) -> None:
        """Write the whole configuration to ``path``.

        ``mode`` applies when the file is created; an existing file keeps its permissions.

        Raises:
            ConfIOError: If the file cannot be written.
        """
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                fh.write(self._buffer)
        except OSError as exc:
            raise ConfIOError(f"could not write file {path}: {exc}") from exc
        logger.debug("Wrote %d character(s) to %s", len(self._buffer), path)

    # ---- Dialect ---------------------------------------------------------------

    @property
    def dialect(self) -> Dialect:
        """Lexical rules in effect; may be swapped between operations."""
        return self._dialect

    @dialect.setter
    def dialect(self, dialect: Dialect) -> None:
        self._dialect = dialect

    # ---- Searching -------------------------------------------------------------

    def _lines_from(self, offset: int) -> Iterator[tuple[int, str]]:
        """Yield ``(line_offset, line)`` pairs from ``offset`` on, line endings included."""
        buf = self._buffer
        size = len(buf)
        while offset < size:
            nl = buf.find(EOL, offset)
            end = size if nl == -1 else nl + 1
            yield offset, buf[offset:end]
            offset = end

    def lookup_row(
        self,
        key_col: int,
        key: str,
        *,
        ignore_case: bool = False,
        offset: int = 0,
    ) -> tuple[Row, int]:
        """Find the first row at or after ``offset`` whose column ``key_col`` equals ``key``.

        The comparison uses the raw column text, quotes included: ``'port'`` does not
        match ``port``. Blank and comment-only lines are skipped.

        Args:
            key_col (int): Index of the column to compare.
            key (str): Value to look for.
            ignore_case (bool): Compare case-insensitively.
            offset (int): Buffer offset of the line to start from.

        Returns:
            tuple[Row, int]: The matching row and the offset of the line after it, from which
            a follow-up search can resume.

        Raises:
            KeyNotFoundError: If no row matches before the end of the buffer.
        """
        wanted = key.lower() if ignore_case else key
        for line_offset, line in self._lines_from(offset):
            try:
                row = parse_line(line, line_offset, self._dialect)
            except EmptyLineError:
                continue
            if not row.has_column(key_col):
                continue
            try:
                found = self.raw(row, key_col)
            except InvalidTokenError:
                continue
            if (found.lower() if ignore_case else found) == wanted:
                logger.debug("Found %r in column %d at offset %d", key, key_col, line_offset)
                return row, line_offset + len(line)
        raise KeyNotFoundError(key, key_col)

    def iter_rows(self, key_col: int, key: str, *, ignore_case: bool = False) -> Iterator[Row]:
        """Yield every row whose column ``key_col`` equals ``key``, top to bottom.

        Do not edit the buffer while iterating; the remaining rows would be stale.
        """
        offset = 0
        while True:
            try:
                row, offset = self.lookup_row(key_col, key, ignore_case=ignore_case, offset=offset)
            except KeyNotFoundError:
                return
            yield row

    def lookup_all(self, key_col: int, key: str, *, ignore_case: bool = False) -> list[Row]:
        """Return every row whose column ``key_col`` equals ``key``.

        Raises:
            KeyNotFoundError: If no row matches.
        """
        rows = list(self.iter_rows(key_col, key, ignore_case=ignore_case))
        if not rows:
            raise KeyNotFoundError(key, key_col)
        return rows

    def lookup_first(self, key_col: int, key: str, *, ignore_case: bool = False) -> Row:
        """Return the first row whose column ``key_col`` equals ``key``.

        Raises:
            KeyNotFoundError: If no row matches.
        """
        row, _ = self.lookup_row(key_col, key, ignore_case=ignore_case)
        return row

    # ---- Quoting ---------------------------------------------------------------

    def has_quotes_or_whitespace(self, value: str) -> bool:
        """Return True if ``value`` contains a dialect quote or whitespace character."""
        return any(ch in self._dialect.whitespace or ch in self._dialect.quotes for ch in value)

    def escape_quotes(self, value: str, quote: str) -> str:
        """Double every occurrence of ``quote`` in ``value``."""
        return value.replace(quote, quote * 2)

    def unescape_quotes(self, value: str, quote: str) -> str:
        """Collapse doubled (and, if enabled, backslash escaped) ``quote`` characters."""
        value = value.replace(quote * 2, quote)
        if self._dialect.backslash_escaped_quotes:
            value = value.replace("\\" + quote, quote)
        return value

    def quote(self, value: str) -> str:
        """Enclose ``value`` in the dialect's default quote, doubling embedded quotes."""
        q = self._dialect.default_quote
        return q + self.escape_quotes(value, q) + q

    def dequote(self, value: str) -> str:
        """Strip one layer of matching enclosing quotes and unescape the inside.

        Values shorter than two characters, or whose first and last characters are not
        the same dialect quote, are returned unchanged.
        """
        if len(value) < 2:
            return value
        first = value[0]
        if first not in self._dialect.quotes or value[-1] != first:
            return value
        return self.unescape_quotes(value[1:-1], first)

    # ---- Reading ---------------------------------------------------------------

    def raw(self, row: Row, col: int) -> str:
        """Return column ``col`` exactly as written, quotes included.

        Raises:
            InvalidColumnError: If the row has no such column.
            InvalidTokenError: If the token is invalid or empty.
        """
        token = row.token(col)
        size = token.size
        if size <= 0:
            raise InvalidTokenError(f"got value size of {size} for column {col}, want size > 0")
        return self._buffer[token.start : token.start + size]

    def as_string(self, row: Row, col: int) -> str:
        """Return column ``col`` dequoted and unescaped."""
        return self.dequote(self.raw(row, col))

    def as_int(self, row: Row, col: int) -> int:
        """Return column ``col`` as an integer.

        Raises:
            ParseError: If the dequoted value is not a decimal integer.
        """
        return parse_int(self.as_string(row, col))

    def as_int64(self, row: Row, col: int) -> int:
        """Return column ``col`` as an integer within the signed 64-bit range.

        Raises:
            ParseError: If the dequoted value is not a decimal integer or out of range.
        """
        return parse_int64(self.as_string(row, col))

    def as_float64(self, row: Row, col: int) -> float:
        """Return column ``col`` as a floating point number.

        Raises:
            ParseError: If the dequoted value is not a number.
        """
        return parse_float(self.as_string(row, col))

    def as_bool(self, row: Row, col: int) -> bool:
        """Return column ``col`` as a boolean (``on``/``off``, ``yes``/``no``, prefixes, ...).

        Raises:
            ParseError: If the dequoted value is not a boolean spelling.
        """
        return parse_bool(self.as_string(row, col))

    # ---- Writing ---------------------------------------------------------------

    def set_raw(self, row: Row, col: int, value: str) -> None:
        """Replace column ``col`` with ``value`` verbatim.

        Only the token's span changes. Tokens of ``row`` and of any other row located
        after the span are stale afterwards if the length changed.

        Raises:
            InvalidColumnError: If the row has no such column.
            InvalidTokenError: If the token is invalid or empty.
        """
        token = row.token(col)
        size = token.size
        if size <= 0:
            raise InvalidTokenError(f"got value size of {size}, want size > 0")
        buf = self._buffer
        self._buffer = buf[: token.start] + value + buf[token.start + size :]
        logger.debug(
            "Replaced [%d, %d) %r with %r",
            token.start,
            token.end,
            buf[token.start : token.start + size],
            value,
        )

    def set_string(self, row: Row, col: int, value: str) -> None:
        """Replace column ``col`` with ``value``, quoting it when needed.

        The value is quoted if the dialect always quotes strings or if it contains
        whitespace or quote characters.

        Note:
            With backslash escaping enabled, a quoted value ending in a backslash does not
            read back: the backslash escapes the closing quote, so the token runs on to
            the comment or end of line. Write such values with `set_raw`.
        """
        if self._dialect.always_quote_strings or self.has_quotes_or_whitespace(value):
            value = self.quote(value)
        self.set_raw(row, col, value)

    def set_int(self, row: Row, col: int, value: int) -> None:
        """Replace column ``col`` with an unquoted integer."""
        self.set_raw(row, col, format_int(value))

    def set_int64(self, row: Row, col: int, value: int) -> None:
        """Replace column ``col`` with an unquoted signed 64-bit integer.

        Raises:
            ParseError: If ``value`` is outside the signed 64-bit range.
        """
        text = format_int(value)
        parse_int64(text)
        self.set_raw(row, col, text)

    def set_float64(self, row: Row, col: int, value: float) -> None:
        """Replace column ``col`` with the shortest decimal text for ``value``.

        For a fixed precision or a quoted number, format it yourself and use `set_raw`.
        """
        self.set_raw(row, col, format_float(value))

    def set_bool(
        self, row: Row, col: int, value: bool, style: BoolStyle = BoolStyle.TRUE_FALSE
    ) -> None:
        """Replace column ``col`` with ``value`` spelled in ``style`` (``true``, ``on``...)."""
        self.set_raw(row, col, style.render(value))

    # ---- Appending -------------------------------------------------------------

    def ensure_ends_with_eol(self) -> None:
        """Terminate the last line with ``\\n`` unless the buffer is empty or already does."""
        if self._buffer and not self._buffer.endswith(EOL):
            self._buffer += EOL

    def append(self, *values: str) -> Row:
        """Append a new line made of ``values`` joined by the dialect delimiter.

        Returns:
            Row: The tokens of the appended line.

        Raises:
            AppendError: If the composed line cannot be tokenized.
        """
        self.ensure_ends_with_eol()
        line = self._dialect.default_delimiter.join(values)
        write_pos = len(self._buffer)
        try:
            row = parse_line(line, write_pos, self._dialect)
        except EmptyLineError as exc:
            raise AppendError(f"failed to parse the line about to be appended: {line!r}") from exc
        self._buffer += line
        logger.debug("Appended %r at offset %d", line, write_pos)
        return row


