# topmark:header:start
#
#   project      : pgconf
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the logging helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from pgconf.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    PgconfLogger,
    get_logger,
    level_from_name,
    resolve_env_log_level,
    setup_logging,
)
from pgconf.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Put the session logging setup back after a test reconfigures it."""
    yield
    setup_logging(level=TRACE_LEVEL)


@parametrize(
    ("name", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("warn", logging.WARNING),
        ("10", 10),
        ("bogus", None),
    ],
)
def test_level_from_name(name: str, expected: int | None) -> None:
    assert level_from_name(name) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
    assert resolve_env_log_level() == logging.DEBUG


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("pgconf.tests.trace")
    assert isinstance(logger, PgconfLogger)
    with caplog.at_level(TRACE_LEVEL, logger="pgconf.tests.trace"):
        logger.trace("scanning %d", 3)
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert caplog.records[0].getMessage() == "scanning 3"


@pytest.mark.usefixtures("restore_logging")
def test_setup_logging_installs_one_handler() -> None:
    setup_logging(level=logging.INFO)
    setup_logging(level=logging.INFO)
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ChalkFormatter)


@pytest.mark.usefixtures("restore_logging")
def test_setup_logging_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "ERROR")
    setup_logging()
    assert logging.getLogger().level == logging.ERROR


def test_chalk_formatter_keeps_the_message() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful %s", ("now",), None)
    assert "careful now" in ChalkFormatter("%(message)s").format(record)
