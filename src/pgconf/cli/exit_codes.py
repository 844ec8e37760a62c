# topmark:header:start
#
#   project      : pgconf
#   file         : exit_codes.py
#   file_relpath : src/pgconf/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the pgconf CLI.

pgconf aligns with the BSD `sysexits` convention where practical, so that shell
scripts can tell a missing parameter from an unreadable file or a malformed
value. The one deliberate divergence is ``KEY_NOT_FOUND = 3``: looking up an
absent key is an expected outcome rather than a failure of the tool, and ``1``
and ``2`` are already taken by generic failures and Click usage errors.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the pgconf CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure. Prefer a more specific code if available.
        KEY_NOT_FOUND: The key or rule being looked up does not exist, or has no value.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: A value could not be parsed as the requested type, or the file
            could not be decoded. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        SOFTWARE_ERROR: Internal failure (e.g. a composed line did not tokenize).
            Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading or writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Malformed dialect file. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled or unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    KEY_NOT_FOUND = 3  # deliberate divergence from sysexits; see module docstring

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
