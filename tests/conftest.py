# topmark:header:start
#
#   project      : pgconf
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the pgconf test suite.

Sets up logging at TRACE for every run, isolates tests from a developer's
``PGCONF_LOG_LEVEL`` and provides the sample configuration files under
``tests/data``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from pgconf.config import logging
from pgconf.constants import LOG_LEVEL_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

DATA_DIR: Path = Path(__file__).parent / "data"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_pgconf_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the log level is not forced via the environment during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def read_sample(name: str) -> str:
    """Return the text of a sample file from ``tests/data``, line endings preserved."""
    with (DATA_DIR / name).open(encoding="utf-8", newline="") as fh:
        return fh.read()


@pytest.fixture
def postgresql_conf_text() -> str:
    """Text of the sample ``postgresql.conf``."""
    return read_sample("postgresql.conf")


@pytest.fixture
def pg_hba_conf_text() -> str:
    """Text of the sample ``pg_hba.conf``."""
    return read_sample("pg_hba.conf")


@pytest.fixture
def postgresql_conf_path(tmp_path: Path, postgresql_conf_text: str) -> Path:
    """A writable copy of the sample ``postgresql.conf``."""
    path = tmp_path / "postgresql.conf"
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(postgresql_conf_text)
    return path


@pytest.fixture
def pg_hba_conf_path(tmp_path: Path, pg_hba_conf_text: str) -> Path:
    """A writable copy of the sample ``pg_hba.conf``."""
    path = tmp_path / "pg_hba.conf"
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(pg_hba_conf_text)
    return path
