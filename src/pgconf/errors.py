# topmark:header:start
#
#   project      : pgconf
#   file         : errors.py
#   file_relpath : src/pgconf/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by pgconf.

Every failure is a subclass of [`PgconfError`][pgconf.errors.PgconfError]. Each
class also derives from the closest built-in exception so callers can catch
``LookupError``, ``ValueError``, ``IndexError`` or ``OSError`` without importing
pgconf.

Usage:
    ```python
    try:
        port = conf.get_int("port")
    except KeyNotFoundError:
        port = 5432
    ```
"""

from __future__ import annotations


class PgconfError(Exception):
    """Base class for all pgconf errors."""


class KeyNotFoundError(PgconfError, LookupError):
    """No row matched the key being looked up."""

    def __init__(self, key: str, col: int = 0, message: str | None = None) -> None:
        self.key = key
        self.col = col
        super().__init__(message or f"key not found: {key!r} (column {col})")


class KeyWithoutValueError(KeyNotFoundError):
    """The key exists but no line carrying it has a value column.

    Derives from `KeyNotFoundError`: a key without a value is not found as far as
    value lookups are concerned.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key, 1, f"key without value: {key!r}")


class EmptyLineError(PgconfError, ValueError):
    """The line holds nothing but whitespace and/or a comment."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"no key found on line at offset {offset}")


class InvalidColumnError(PgconfError, IndexError):
    """The row has no token for the requested column."""

    def __init__(self, col: int, col_count: int) -> None:
        self.col = col
        self.col_count = col_count
        super().__init__(f"invalid column index {col} (row has {col_count} column(s))")


class InvalidTokenError(PgconfError, ValueError):
    """The token is unset, inverted or has a size of zero."""


class ParseError(PgconfError, ValueError):
    """A dequoted value does not match the requested numeric or boolean grammar."""

    def __init__(self, value: str, kind: str) -> None:
        self.value = value
        self.kind = kind
        super().__init__(f"cannot parse {value!r} as {kind}")


class EmptyArgumentError(PgconfError, ValueError):
    """A field required to compose a new row is blank."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"empty argument: {name}")


class InvalidKeyError(PgconfError, ValueError):
    """A key to be appended contains a separator, quote, comment or newline character."""

    def __init__(self, key: str, char: str) -> None:
        self.key = key
        self.char = char
        super().__init__(f"invalid key {key!r}: contains {char!r}")


class DialectConfigError(PgconfError, ValueError):
    """A dialect definition (TOML table) is malformed."""


class ConfIOError(PgconfError, OSError):
    """Reading or writing the configuration text failed."""


class AppendError(PgconfError, RuntimeError):
    """A freshly composed line could not be tokenized.

    This signals a bug in the code that composed the line, not bad input.
    """
