# topmark:header:start
#
#   project      : pgconf
#   file         : test_postgresql.py
#   file_relpath : tests/dialects/test_postgresql.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `PostgresqlConf` against a realistic ``postgresql.conf``."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from pgconf.errors import (
    EmptyArgumentError,
    InvalidKeyError,
    KeyNotFoundError,
    KeyWithoutValueError,
    ParseError,
)
from pgconf.postgresql import PostgresqlConf
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def conf(postgresql_conf_text: str) -> PostgresqlConf:
    """The sample ``postgresql.conf``."""
    return PostgresqlConf(postgresql_conf_text)


# ---- Reading -------------------------------------------------------------------


def test_strings(conf: PostgresqlConf) -> None:
    assert conf.get_string("listen_addresses") == "*"
    assert conf.get_raw("listen_addresses") == "'*'"
    assert conf.get_string("log_destination") == "syslog"
    assert conf.get_raw("log_destination") == "'syslog'"
    assert conf.get_string("shared_buffers") == "128MB"


def test_mixed_quote_escaping(conf: PostgresqlConf) -> None:
    assert conf.get_string("search_path") == "\"$user\", 'public', 'other'"


def test_integers(conf: PostgresqlConf) -> None:
    assert conf.get_int("port") == 5432
    assert conf.get_int("max_wal_senders") == 10
    assert conf.get_int64("autovacuum_multixact_freeze_max_age") == 400000000000


def test_last_definition_wins_ignoring_case(conf: PostgresqlConf) -> None:
    assert conf.get_int("max_connections") == 200
    assert conf.get_int("Max_Connections") == 200


def test_unit_suffix_is_not_an_integer(conf: PostgresqlConf) -> None:
    with pytest.raises(ParseError):
        conf.get_int("shared_buffers")


def test_floats(conf: PostgresqlConf) -> None:
    assert conf.get_float64("checkpoint_completion_target") == 0.9
    assert conf.get_float64("vacuum_cost_delay") == 0.005
    assert conf.get_float64("cpu_tuple_cost") == 0.01


@parametrize(
    ("key", "expected"),
    [
        ("log_connections", True),
        ("fsync", True),
        ("synchronous_commit", False),
        ("full_page_writes", True),
        ("wal_compression", False),
        ("hot_standby", True),
    ],
)
def test_booleans(conf: PostgresqlConf, key: str, expected: bool) -> None:
    assert conf.get_bool(key) is expected


def test_key_without_value(conf: PostgresqlConf) -> None:
    with pytest.raises(KeyWithoutValueError) as excinfo:
        conf.get_raw("nosuchkey")
    assert excinfo.value.key == "nosuchkey"
    assert "nosuchkey" not in conf
    assert conf.get("nosuchkey") is None


def test_commented_out_key_is_missing(conf: PostgresqlConf) -> None:
    with pytest.raises(KeyNotFoundError) as excinfo:
        conf.get_int("superuser_reserved_connections")
    assert not isinstance(excinfo.value, KeyWithoutValueError)
    assert conf.get("superuser_reserved_connections", "3") == "3"


def test_mapping_conveniences(conf: PostgresqlConf) -> None:
    assert "port" in conf
    assert "PORT" in conf
    assert 5432 not in conf
    assert conf.get("port") == "5432"


# ---- Writing -------------------------------------------------------------------


def test_set_changes_only_the_value(conf: PostgresqlConf, postgresql_conf_text: str) -> None:
    conf.set_int("port", 5433)
    assert conf.all() == postgresql_conf_text.replace("port = 5432", "port = 5433", 1)


def test_set_string_keeps_glued_comment(conf: PostgresqlConf, postgresql_conf_text: str) -> None:
    conf.set_string("log_destination", "stderr")
    assert conf.all() == postgresql_conf_text.replace(
        "log_destination='syslog'#", "log_destination='stderr'#"
    )


def test_set_writes_the_winning_definition(conf: PostgresqlConf) -> None:
    conf.set_int("max_connections", 300)
    assert "max_connections = 100\t" in conf.all()
    assert "MAX_CONNECTIONS = 300\t" in conf.all()
    assert conf.get_int("max_connections") == 300


def test_set_missing_key_appends(conf: PostgresqlConf, postgresql_conf_text: str) -> None:
    conf.set_int("work_mem", 64)
    assert conf.all() == postgresql_conf_text + "work_mem = 64"
    assert conf.get_int("work_mem") == 64


def test_set_key_without_value_appends(conf: PostgresqlConf, postgresql_conf_text: str) -> None:
    conf.set_string("nosuchkey", "now set")
    assert conf.all() == postgresql_conf_text + "nosuchkey = 'now set'"
    assert conf.get_string("nosuchkey") == "now set"


def test_set_string_doubles_quotes() -> None:
    conf = PostgresqlConf()
    conf.set_string("application_name", "it's")
    assert conf.all() == "application_name = 'it''s'"
    assert conf.get_string("application_name") == "it's"


@parametrize("key", ["", "   ", "\t"])
def test_set_rejects_blank_key(conf: PostgresqlConf, postgresql_conf_text: str, key: str) -> None:
    with pytest.raises(EmptyArgumentError) as excinfo:
        conf.set_string(key, "x")
    assert excinfo.value.name == "key"
    assert conf.all() == postgresql_conf_text


@parametrize(
    ("key", "char"),
    [("my key", " "), ("work_mem=", "="), ("it's", "'"), ("a#b", "#"), ("a\nb", "\n")],
)
def test_set_rejects_key_that_would_not_read_back(
    conf: PostgresqlConf, postgresql_conf_text: str, key: str, char: str
) -> None:
    with pytest.raises(InvalidKeyError) as excinfo:
        conf.set_string(key, "x")
    assert excinfo.value.char == char
    assert conf.all() == postgresql_conf_text


def test_trailing_backslash_escapes_closing_quote() -> None:
    conf = PostgresqlConf("data_directory = 'old'   # where\n")
    conf.set_string("data_directory", "C:\\pg\\")
    assert conf.all() == "data_directory = 'C:\\pg\\'   # where\n"
    # the token now runs on to the comment
    assert conf.get_raw("data_directory") == "'C:\\pg\\'   "
    assert conf.get_string("data_directory") == "'C:\\pg\\'   "


def test_sequential_edits_stay_consistent(conf: PostgresqlConf) -> None:
    conf.set_string("listen_addresses", "localhost, 10.0.0.1")
    conf.set_int("port", 6543)
    conf.set_on_off("fsync", False)
    conf.set_yes_no("log_connections", False)
    conf.set_true_false("hot_standby", False)
    conf.set_float64("checkpoint_completion_target", 0.5)
    conf.set_raw("shared_buffers", "1GB")
    conf.set_int64("autovacuum_multixact_freeze_max_age", 2**40)

    assert conf.get_string("listen_addresses") == "localhost, 10.0.0.1"
    assert conf.get_int("port") == 6543
    assert conf.get_raw("fsync") == "off"
    assert conf.get_raw("log_connections") == "no"
    assert conf.get_raw("hot_standby") == "false"
    assert conf.get_raw("checkpoint_completion_target") == "0.5"
    assert conf.get_raw("shared_buffers") == "1GB"
    assert conf.get_int64("autovacuum_multixact_freeze_max_age") == 2**40
    assert "fsync = off\n" in conf.all()
    assert "log_connections no\n" in conf.all()
    assert "\t\t# what IP address(es) to listen on;\n" in conf.all()


def test_out_of_range_int64_leaves_buffer_untouched(
    conf: PostgresqlConf, postgresql_conf_text: str
) -> None:
    with pytest.raises(ParseError):
        conf.set_int64("port", 2**63)
    assert conf.all() == postgresql_conf_text


def test_file_round_trip(postgresql_conf_path: Path, tmp_path: Path) -> None:
    conf = PostgresqlConf.open(postgresql_conf_path)
    conf.set_string("log_destination", "csvlog")

    out = tmp_path / "out.conf"
    conf.write_file(out)

    again = PostgresqlConf.open(out)
    assert again.get_string("log_destination") == "csvlog"
    assert again.all() == conf.all()


def test_stream_round_trip(postgresql_conf_text: str) -> None:
    conf = PostgresqlConf.open_stream(io.StringIO(postgresql_conf_text))
    buf = io.StringIO()
    conf.write_to(buf)
    assert buf.getvalue() == postgresql_conf_text
    assert str(conf) == postgresql_conf_text
