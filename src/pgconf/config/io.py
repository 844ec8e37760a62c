# topmark:header:start
#
#   project      : pgconf
#   file         : io.py
#   file_relpath : src/pgconf/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and render dialect definitions as TOML.

A dialect file is either a standalone TOML document with a ``[dialect]`` table:

```toml
[dialect]
base = "postgresql"
always_quote_strings = false
```

or a ``pyproject.toml`` carrying the same table at ``[tool.pgconf.dialect]``.
The optional ``base`` key selects the preset the remaining keys are applied to
(``generic`` when omitted). Parsing is done with `tomlkit`.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pgconf.config.dialect import Dialect, preset
from pgconf.config.logging import get_logger
from pgconf.constants import DIALECT_TABLE, PYPROJECT_DIALECT_PATH
from pgconf.errors import DialectConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from pgconf.config.logging import PgconfLogger

logger: PgconfLogger = get_logger(__name__)

TomlTable = dict[str, Any]

_BASE_KEY: Final[str] = "base"

_FIELD_TYPES: Final[dict[str, type]] = {
    f.name: (bool if f.type in ("bool", bool) else str) for f in dataclasses.fields(Dialect)
}


def _descend(table: TomlTable, path: tuple[str, ...]) -> TomlTable | None:
    node: Any = table
    for key in path:
        if not isinstance(node, dict) or key not in node:
            return None
        node = cast("TomlTable", node)[key]
    return cast("TomlTable", node) if isinstance(node, dict) else None


def dialect_from_table(table: TomlTable, *, source: str = "<table>") -> Dialect:
    """Build a dialect from a plain ``[dialect]`` table.

    Args:
        table (TomlTable): Keys named after `Dialect` fields, plus an optional ``base``.
        source (str): Where the table came from, used in error messages.

    Returns:
        Dialect: The base preset with the table's values applied.

    Raises:
        DialectConfigError: If ``base`` is unknown, a key is not a dialect field, or a value has
            the wrong type.
    """
    base_name: Any = table.get(_BASE_KEY, "generic")
    if not isinstance(base_name, str):
        raise DialectConfigError(f"{source}: 'base' must be a string, got {base_name!r}")
    base: Dialect = preset(base_name)

    changes: dict[str, Any] = {}
    for key, value in table.items():
        if key == _BASE_KEY:
            continue
        expected: type | None = _FIELD_TYPES.get(key)
        if expected is None:
            raise DialectConfigError(f"{source}: unknown dialect key {key!r}")
        if not isinstance(value, expected):
            raise DialectConfigError(
                f"{source}: {key!r} must be of type {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        changes[key] = value

    logger.debug("Dialect from %s: base=%s, overrides=%r", source, base_name, changes)
    return base.replace(**changes)


def dialect_from_toml(text: str, *, source: str = "<string>") -> Dialect:
    """Parse a TOML document and build the dialect it defines.

    ``[dialect]`` is looked up first, then ``[tool.pgconf.dialect]``.

    Args:
        text (str): TOML document text.
        source (str): Where the text came from, used in error messages.

    Returns:
        Dialect: The dialect defined by the document.

    Raises:
        DialectConfigError: If the text is not valid TOML or defines no dialect table.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise DialectConfigError(f"{source}: invalid TOML: {exc}") from exc

    data: TomlTable = cast("TomlTable", doc.unwrap())
    table: TomlTable | None = _descend(data, (DIALECT_TABLE,))
    if table is None:
        table = _descend(data, PYPROJECT_DIALECT_PATH)
    if table is None:
        raise DialectConfigError(
            f"{source}: no [{DIALECT_TABLE}] or [{'.'.join(PYPROJECT_DIALECT_PATH)}] table"
        )
    return dialect_from_table(table, source=source)


def load_dialect(path: Path) -> Dialect:
    """Load a dialect definition from a TOML file.

    Args:
        path (Path): A dialect TOML file or a ``pyproject.toml``.

    Returns:
        Dialect: The dialect defined by the file.

    Raises:
        DialectConfigError: If the file cannot be read or does not define a dialect.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DialectConfigError(f"cannot read dialect file {path}: {exc}") from exc
    return dialect_from_toml(text, source=str(path))


def dialect_to_toml(dialect: Dialect) -> str:
    """Render ``dialect`` as a standalone TOML document with a ``[dialect]`` table.

    The output can be fed back to
    [`dialect_from_toml`][pgconf.config.io.dialect_from_toml].

    Args:
        dialect (Dialect): The dialect to render.

    Returns:
        str: TOML document text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    tbl = tomlkit.table()
    for f in dataclasses.fields(dialect):
        tbl.add(f.name, getattr(dialect, f.name))
    doc.add(DIALECT_TABLE, tbl)
    return doc.as_string()
