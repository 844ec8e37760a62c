# topmark:header:start
#
#   project      : pgconf
#   file         : postgresql.py
#   file_relpath : src/pgconf/postgresql.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Key-indexed access to ``postgresql.conf`` files.

`PostgresqlConf` wraps a [`ConfEditor`][pgconf.core.editor.ConfEditor] set up
with the [`POSTGRESQL`][pgconf.config.dialect.POSTGRESQL] dialect, where ``=``
counts as whitespace so ``port = 5432``, ``port=5432`` and ``port 5432`` all
read the same.

Lookups are case-insensitive and follow PostgreSQL's own rule: when a parameter
is set more than once, the last line that carries a value wins. Setters re-run
the lookup on every call, so a sequence of edits never works from stale
offsets. Setting a key that is absent appends ``key = ''`` first and then
writes the value over the placeholder.

Example:
    ```python
    conf = PostgresqlConf.open(Path("postgresql.conf"))
    if conf.get("log_destination") != "syslog":
        conf.set_string("log_destination", "syslog")
    conf.write_file(Path("postgresql.conf"))
    ```
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Final, overload

from pgconf.config.dialect import POSTGRESQL
from pgconf.config.logging import get_logger
from pgconf.constants import DEFAULT_FILE_MODE, EOL
from pgconf.core.editor import ConfEditor
from pgconf.core.values import BoolStyle, parse_bool
from pgconf.errors import (
    EmptyArgumentError,
    InvalidColumnError,
    InvalidKeyError,
    InvalidTokenError,
    KeyNotFoundError,
    KeyWithoutValueError,
)

if TYPE_CHECKING:
    from pathlib import Path

    from pgconf.config.dialect import Dialect
    from pgconf.config.logging import PgconfLogger
    from pgconf.core.row import Row

logger: PgconfLogger = get_logger(__name__)

KEY_COL: Final[int] = 0
VALUE_COL: Final[int] = 1

# Written over by the real value right after appending.
_EMPTY_VALUE: Final[str] = "''"


class PostgresqlConf:
    """A ``postgresql.conf`` document addressed by parameter name.

    Args:
        text (str): The configuration document.
        dialect (Dialect): Lexical rules; defaults to the ``postgresql.conf`` preset.
    """

    def __init__(self, text: str = "", dialect: Dialect = POSTGRESQL) -> None:
        self.editor: ConfEditor = ConfEditor(text, dialect)

    @classmethod
    def open(cls, path: Path, dialect: Dialect = POSTGRESQL) -> PostgresqlConf:
        """Read a ``postgresql.conf`` file.

        Raises:
            ConfIOError: If the file cannot be read.
        """
        return cls(ConfEditor.open(path, dialect).all(), dialect)

    @classmethod
    def open_stream(cls, stream: IO[str], dialect: Dialect = POSTGRESQL) -> PostgresqlConf:
        """Read a ``postgresql.conf`` document from a text stream.

        Raises:
            ConfIOError: If reading fails.
        """
        return cls(ConfEditor.open_stream(stream, dialect).all(), dialect)

    def all(self) -> str:
        """Return the whole document."""
        return self.editor.all()

    def __str__(self) -> str:
        return self.editor.all()

    def write_to(self, stream: IO[str]) -> int:
        """Write the whole document to a text stream and return the number of characters."""
        return self.editor.write_to(stream)

    def write_file(self, path: Path, mode: int = DEFAULT_FILE_MODE) -> None:
        """Write the whole document to ``path``."""
        self.editor.write_file(path, mode)

    # ---- Lookup ----------------------------------------------------------------

    def lookup_key(self, key: str) -> Row:
        """Return the last row that assigns a value to ``key``.

        Raises:
            KeyNotFoundError: If ``key`` does not appear at all.
            KeyWithoutValueError: If ``key`` appears only on lines without a value.
        """
        found: Row | None = None
        seen = False
        for row in self.editor.iter_rows(KEY_COL, key, ignore_case=True):
            seen = True
            if row.has_column(VALUE_COL):
                found = row
        if found is not None:
            return found
        if seen:
            raise KeyWithoutValueError(key)
        raise KeyNotFoundError(key, KEY_COL)

    def lookup_or_append_key(self, key: str) -> Row:
        """Return the row assigning ``key``, appending ``key = ''`` if there is none.

        Raises:
            EmptyArgumentError: If ``key`` must be appended and is blank.
            InvalidKeyError: If ``key`` must be appended and would not read back as a
                single column.
        """
        try:
            return self.lookup_key(key)
        except KeyNotFoundError:
            self._check_new_key(key)
            logger.debug("Appending new parameter %r", key)
            return self.editor.append(key, _EMPTY_VALUE)

    def _check_new_key(self, key: str) -> None:
        if not key.strip():
            raise EmptyArgumentError("key")
        dialect = self.editor.dialect
        forbidden = dialect.whitespace + dialect.quotes + dialect.inline_comment + EOL
        for ch in key:
            if ch in forbidden:
                raise InvalidKeyError(key, ch)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self.lookup_key(key)
        except KeyNotFoundError:
            return False
        return True

    # ---- Reading ---------------------------------------------------------------

    def get_raw(self, key: str) -> str:
        """Return the value of ``key`` exactly as written, quotes included.

        Raises:
            KeyNotFoundError: If ``key`` does not appear.
            KeyWithoutValueError: If ``key`` has no value.
        """
        row = self.lookup_key(key)
        try:
            return self.editor.raw(row, VALUE_COL)
        except (InvalidColumnError, InvalidTokenError) as exc:
            raise KeyWithoutValueError(key) from exc

    def get_string(self, key: str) -> str:
        """Return the value of ``key`` dequoted: ``'syslog'`` reads as ``syslog``."""
        return self.editor.dequote(self.get_raw(key))

    @overload
    def get(self, key: str) -> str | None: ...

    @overload
    def get(self, key: str, default: str) -> str: ...

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the dequoted value of ``key``, or ``default`` if it is not set."""
        try:
            return self.get_string(key)
        except KeyNotFoundError:
            return default

    def get_int(self, key: str) -> int:
        """Return the value of ``key`` as an integer.

        Raises:
            ParseError: If the value is not a decimal integer (``128MB`` is not).
        """
        return self.editor.as_int(self.lookup_key(key), VALUE_COL)

    def get_int64(self, key: str) -> int:
        """Return the value of ``key`` as a signed 64-bit integer."""
        return self.editor.as_int64(self.lookup_key(key), VALUE_COL)

    def get_float64(self, key: str) -> float:
        """Return the value of ``key`` as a floating point number."""
        return self.editor.as_float64(self.lookup_key(key), VALUE_COL)

    def get_bool(self, key: str) -> bool:
        """Return the value of ``key`` as a boolean.

        Accepts ``on``, ``off``, ``true``, ``false``, ``yes``, ``no``, ``1``, ``0`` and
        unambiguous prefixes, in any case.

        Raises:
            ParseError: If the value is not a boolean spelling.
        """
        return parse_bool(self.get_string(key))

    # ---- Writing ---------------------------------------------------------------

    def set_raw(self, key: str, value: str) -> None:
        """Set ``key`` to ``value`` verbatim (the caller supplies any quotes)."""
        self.editor.set_raw(self.lookup_or_append_key(key), VALUE_COL, value)

    def set_string(self, key: str, value: str) -> None:
        """Set ``key`` to ``value`` in single quotes, doubling embedded quotes.

        A value ending in a backslash escapes its own closing quote and does not
        read back unchanged.
        """
        self.editor.set_string(self.lookup_or_append_key(key), VALUE_COL, value)

    def set_int(self, key: str, value: int) -> None:
        """Set ``key`` to an unquoted integer."""
        self.editor.set_int(self.lookup_or_append_key(key), VALUE_COL, value)

    def set_int64(self, key: str, value: int) -> None:
        """Set ``key`` to an unquoted signed 64-bit integer."""
        self.editor.set_int64(self.lookup_or_append_key(key), VALUE_COL, value)

    def set_float64(self, key: str, value: float) -> None:
        """Set ``key`` to the shortest decimal text for ``value`` (``0.005``, ``10``)."""
        self.editor.set_float64(self.lookup_or_append_key(key), VALUE_COL, value)

    def set_true_false(self, key: str, value: bool) -> None:
        """Set ``key`` to ``true`` or ``false``."""
        self.set_raw(key, BoolStyle.TRUE_FALSE.render(value))

    def set_on_off(self, key: str, value: bool) -> None:
        """Set ``key`` to ``on`` or ``off``."""
        self.set_raw(key, BoolStyle.ON_OFF.render(value))

    def set_yes_no(self, key: str, value: bool) -> None:
        """Set ``key`` to ``yes`` or ``no``."""
        self.set_raw(key, BoolStyle.YES_NO.render(value))
