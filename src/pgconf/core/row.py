# topmark:header:start
#
#   project      : pgconf
#   file         : row.py
#   file_relpath : src/pgconf/core/row.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokens and rows: column spans within the configuration buffer.

Offsets are indices into the editor's buffer string, not into the line the
row was parsed from. Rows do not track later edits: after a splice that changes
the buffer length, every token past the splice point is stale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pgconf.constants import UNSET
from pgconf.errors import InvalidColumnError, InvalidTokenError

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class Token:
    """Half-open span ``[start, end)`` of one column value, quotes included.

    Attributes:
        start (int): Offset of the first character, or ``UNSET``.
        end (int): Offset one past the last character, or ``UNSET``.
    """

    start: int = UNSET
    end: int = UNSET

    @property
    def size(self) -> int:
        """Return the length of the span.

        Raises:
            InvalidTokenError: If a bound is unset or ``start > end``.
        """
        if self.start == UNSET:
            raise InvalidTokenError("invalid token: start is unset")
        if self.end == UNSET:
            raise InvalidTokenError("invalid token: end is unset")
        if self.start > self.end:
            raise InvalidTokenError(
                f"invalid token: start ({self.start}) > end ({self.end}) position"
            )
        return self.end - self.start

    def as_slice(self) -> slice:
        """Return the span as a ``slice`` suitable for indexing the buffer."""
        return slice(self.start, self.end)


@dataclass(slots=True)
class Row:
    """Column spans found on one logical line, in column order."""

    tokens: list[Token] = field(default_factory=list)

    @property
    def col_count(self) -> int:
        """Number of columns found on the line."""
        return len(self.tokens)

    def has_column(self, col: int) -> bool:
        """Return True if a token exists for column index ``col``."""
        return 0 <= col < len(self.tokens)

    def token(self, col: int) -> Token:
        """Return the token for column ``col``.

        Raises:
            InvalidColumnError: If the row has no such column.
        """
        if not self.has_column(col):
            raise InvalidColumnError(col, len(self.tokens))
        return self.tokens[col]

    def value_size(self, col: int) -> int:
        """Return the length of column ``col``'s value.

        Raises:
            InvalidColumnError: If the row has no such column.
            InvalidTokenError: If the token geometry is invalid.
        """
        return self.token(col).size

    def add_token(self, start: int, end: int) -> None:
        """Append a column span to the row."""
        self.tokens.append(Token(start, end))

    @property
    def start(self) -> int:
        """Offset of the first column, or ``UNSET`` for an empty row."""
        return self.tokens[0].start if self.tokens else UNSET

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)
