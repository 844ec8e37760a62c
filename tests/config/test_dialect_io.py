# topmark:header:start
#
#   project      : pgconf
#   file         : test_dialect_io.py
#   file_relpath : tests/config/test_dialect_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for reading and rendering dialects as TOML."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pgconf.config.dialect import GENERIC, HBA, POSTGRESQL
from pgconf.config.io import dialect_from_table, dialect_from_toml, dialect_to_toml, load_dialect
from pgconf.errors import DialectConfigError
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from pgconf.config.dialect import Dialect


def test_standalone_dialect_table() -> None:
    text = """
[dialect]
base = "postgresql"
always_quote_strings = false
inline_comment = ";"
"""
    dialect = dialect_from_toml(text)
    assert dialect == POSTGRESQL.replace(always_quote_strings=False, inline_comment=";")


def test_pyproject_dialect_table() -> None:
    text = """
[project]
name = "db-tools"

[tool.pgconf.dialect]
whitespace = " \\t:"
"""
    dialect = dialect_from_toml(text)
    assert dialect == GENERIC.replace(whitespace=" \t:")


def test_base_defaults_to_generic() -> None:
    assert dialect_from_table({}) == GENERIC


@parametrize(
    ("table", "message"),
    [
        ({"base": "mysql"}, "unknown dialect"),
        ({"base": 3}, "'base' must be a string"),
        ({"comment": "#"}, "unknown dialect key"),
        ({"always_quote_strings": "yes"}, "must be of type bool"),
        ({"whitespace": 1}, "must be of type str"),
        ({"default_quote": "`"}, "default_quote"),
    ],
)
def test_invalid_tables(table: dict[str, object], message: str) -> None:
    with pytest.raises(DialectConfigError, match=message):
        dialect_from_table(table, source="test.toml")


def test_invalid_toml() -> None:
    with pytest.raises(DialectConfigError, match="invalid TOML"):
        dialect_from_toml("[dialect\nbase = ", source="broken.toml")


def test_missing_table() -> None:
    with pytest.raises(DialectConfigError, match=r"no \[dialect\]"):
        dialect_from_toml("[tool.other]\nx = 1\n")


@parametrize("dialect", [GENERIC, POSTGRESQL, HBA.replace(quote_aware_comments=True)])
def test_rendered_toml_reads_back(dialect: Dialect) -> None:
    text = dialect_to_toml(dialect)
    assert text.lstrip().startswith("[dialect]")
    assert dialect_from_toml(text) == dialect


def test_load_dialect(tmp_path: Path) -> None:
    path = tmp_path / "dialect.toml"
    path.write_text('[dialect]\nbase = "hba"\ndefault_delimiter = " "\n', encoding="utf-8")
    assert load_dialect(path) == HBA.replace(default_delimiter=" ")


def test_load_dialect_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DialectConfigError, match="cannot read dialect file"):
        load_dialect(tmp_path / "nope.toml")
