# topmark:header:start
#
#   project      : pgconf
#   file         : test_cli_get.py
#   file_relpath : tests/cli/test_cli_get.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: ``pgconf get``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pgconf.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, write_text
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
@parametrize(
    ("args", "expected"),
    [
        (["port"], "5432"),
        (["listen_addresses"], "*"),
        (["--raw", "listen_addresses"], "'*'"),
        (["search_path"], "\"$user\", 'public', 'other'"),
        (["--type", "int", "MAX_CONNECTIONS"], "200"),
        (["--type", "int", "max_wal_senders"], "10"),
        (["--type", "bool", "log_connections"], "true"),
        (["--type", "bool", "synchronous_commit"], "false"),
        (["--type", "float", "vacuum_cost_delay"], "0.005"),
        (["--type", "float", "cpu_tuple_cost"], "0.01"),
    ],
)
def test_get_values(postgresql_conf_path: Path, args: list[str], expected: str) -> None:
    *options, key = args
    result = run_cli(["get", *options, str(postgresql_conf_path), key])
    assert_SUCCESS(result)
    assert result.output == expected + "\n"


@mark_cli
def test_get_does_not_modify_the_file(
    postgresql_conf_path: Path, postgresql_conf_text: str
) -> None:
    assert_SUCCESS(run_cli(["get", str(postgresql_conf_path), "port"]))
    assert postgresql_conf_path.read_bytes() == postgresql_conf_text.encode("utf-8")


@mark_cli
@parametrize(
    ("args", "code"),
    [
        (["missing_key"], ExitCode.KEY_NOT_FOUND),
        (["nosuchkey"], ExitCode.KEY_NOT_FOUND),
        (["superuser_reserved_connections"], ExitCode.KEY_NOT_FOUND),
        (["--type", "int", "shared_buffers"], ExitCode.DATA_ERROR),
        (["--type", "bool", "listen_addresses"], ExitCode.DATA_ERROR),
        (["--raw", "--type", "int", "port"], ExitCode.USAGE_ERROR),
    ],
)
def test_get_errors(postgresql_conf_path: Path, args: list[str], code: ExitCode) -> None:
    *options, key = args
    result = run_cli(["get", *options, str(postgresql_conf_path), key])
    assert_exit(result, code)


@mark_cli
def test_get_reports_missing_key(postgresql_conf_path: Path) -> None:
    result = run_cli(["get", str(postgresql_conf_path), "missing_key"])
    assert "key not found: 'missing_key'" in result.output


@mark_cli
def test_get_missing_file(tmp_path: Path) -> None:
    result = run_cli(["get", str(tmp_path / "absent.conf"), "port"])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)


@mark_cli
def test_get_with_dialect_file(tmp_path: Path) -> None:
    conf = write_text(tmp_path / "app.conf", "port: 5432 ; the port\nname: 'db # 1'\n")
    dialect = write_text(
        tmp_path / "dialect.toml",
        '[dialect]\nbase = "postgresql"\nwhitespace = " \\t\\r:"\ninline_comment = ";"\n',
    )

    result = run_cli(["get", "--dialect-file", str(dialect), str(conf), "port"])
    assert_SUCCESS(result)
    assert result.output == "5432\n"

    result = run_cli(["get", "--dialect-file", str(dialect), str(conf), "name"])
    assert_SUCCESS(result)
    assert result.output == "db # 1\n"


@mark_cli
def test_get_with_broken_dialect_file(tmp_path: Path, postgresql_conf_path: Path) -> None:
    dialect = write_text(tmp_path / "dialect.toml", "[dialect]\ncomment = ';'\n")
    result = run_cli(["get", "--dialect-file", str(dialect), str(postgresql_conf_path), "port"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
