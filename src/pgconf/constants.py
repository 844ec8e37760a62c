# topmark:header:start
#
#   project      : pgconf
#   file         : constants.py
#   file_relpath : src/pgconf/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pgconf constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    PGCONF_VERSION: str = get_version("pgconf")
except PackageNotFoundError:  # running from a source checkout
    PGCONF_VERSION = "0.0.0"

LOG_LEVEL_ENV_VAR: Final[str] = "PGCONF_LOG_LEVEL"

# Offset/bound marker for tokens that have not been closed.
UNSET: Final[int] = -1

EOL: Final[str] = "\n"

# Table that holds a dialect definition in a standalone TOML file
# and its location inside pyproject.toml.
DIALECT_TABLE: Final[str] = "dialect"
PYPROJECT_DIALECT_PATH: Final[tuple[str, ...]] = ("tool", "pgconf", "dialect")

DEFAULT_FILE_MODE: Final[int] = 0o644
