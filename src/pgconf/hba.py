# topmark:header:start
#
#   project      : pgconf
#   file         : hba.py
#   file_relpath : src/pgconf/hba.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule-table access to ``pg_hba.conf`` files.

Each non-comment line of ``pg_hba.conf`` is a rule made of whitespace separated
columns. [`HbaColumn`][pgconf.hba.HbaColumn] names the leading five; lookups
match any of them case-insensitively.
"""

from __future__ import annotations

from enum import IntEnum
from typing import IO, TYPE_CHECKING

from pgconf.config.dialect import HBA
from pgconf.config.logging import get_logger
from pgconf.constants import DEFAULT_FILE_MODE
from pgconf.core.editor import ConfEditor
from pgconf.errors import EmptyArgumentError

if TYPE_CHECKING:
    from pathlib import Path

    from pgconf.config.dialect import Dialect
    from pgconf.config.logging import PgconfLogger
    from pgconf.core.row import Row

logger: PgconfLogger = get_logger(__name__)


class HbaColumn(IntEnum):
    """Column positions of a ``pg_hba.conf`` rule."""

    CONN_TYPE = 0
    DATABASE = 1
    USER = 2
    ADDRESS = 3
    METHOD = 4


class HbaConf:
    """A ``pg_hba.conf`` document.

    Args:
        text (str): The configuration document.
        dialect (Dialect): Lexical rules; defaults to the ``pg_hba.conf`` preset.
    """

    def __init__(self, text: str = "", dialect: Dialect = HBA) -> None:
        self.editor: ConfEditor = ConfEditor(text, dialect)

    @classmethod
    def open(cls, path: Path, dialect: Dialect = HBA) -> HbaConf:
        """Read a ``pg_hba.conf`` file.

        Raises:
            ConfIOError: If the file cannot be read.
        """
        return cls(ConfEditor.open(path, dialect).all(), dialect)

    @classmethod
    def open_stream(cls, stream: IO[str], dialect: Dialect = HBA) -> HbaConf:
        """Read a ``pg_hba.conf`` document from a text stream."""
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

    def lookup_first(self, col: HbaColumn | int, value: str) -> Row:
        """Return the first rule whose column ``col`` equals ``value``, ignoring case.

        Raises:
            KeyNotFoundError: If no rule matches.
        """
        return self.editor.lookup_first(int(col), value, ignore_case=True)

    def lookup_all(self, col: HbaColumn | int, value: str) -> list[Row]:
        """Return every rule whose column ``col`` equals ``value``, ignoring case.

        Raises:
            KeyNotFoundError: If no rule matches.
        """
        return self.editor.lookup_all(int(col), value, ignore_case=True)

    def columns(self, row: Row) -> list[str]:
        """Return every column of ``row``, dequoted."""
        return [self.editor.as_string(row, col) for col in range(row.col_count)]

    def get_column(self, row: Row, col: HbaColumn | int) -> str:
        """Return column ``col`` of ``row``, dequoted.

        Raises:
            InvalidColumnError: If the rule has fewer columns.
        """
        return self.editor.as_string(row, int(col))

    def set_column(self, row: Row, col: HbaColumn | int, value: str) -> None:
        """Overwrite column ``col`` of ``row``, quoting ``value`` if it needs it."""
        self.editor.set_string(row, int(col), value)

    def append_entry(
        self,
        conn_type: str,
        database: str,
        user: str,
        address: str,
        method: str,
    ) -> Row:
        """Append a rule at the end of the document.

        Args:
            conn_type (str): ``local``, ``host``, ``hostssl``, ...
            database (str): Database name(s) or ``all``.
            user (str): Role name(s) or ``all``.
            address (str): Client address (CIDR or host name).
            method (str): Authentication method.

        Returns:
            Row: The tokens of the new rule.

        Raises:
            EmptyArgumentError: If any argument is blank.
        """
        fields = {
            "conn_type": conn_type,
            "database": database,
            "user": user,
            "address": address,
            "method": method,
        }
        for name, value in fields.items():
            if not value.strip():
                raise EmptyArgumentError(name)
        logger.debug("Appending rule %s", " ".join(fields.values()))
        return self.editor.append(*fields.values())
