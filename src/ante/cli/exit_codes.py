# topmark:header:start
#
#   project      : Ante
#   file         : exit_codes.py
#   file_relpath : src/ante/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Exit codes for the Ante CLI.

Ante follows the BSD ``sysexits`` convention where practical. The one
deliberate divergence is ``WOULD_CHANGE = 2``, returned by ``fix --dry-run``
when files would be modified. Click's own usage errors also exit with 2, so
tests check ``result.exception`` to tell the two apart.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Ante CLI.

    Attributes:
        SUCCESS: Nothing to report.
        FAILURE: ``check`` found invalid headers, or ``add`` refused to overwrite.
        WOULD_CHANGE: Dry run: files would be modified.
        USAGE_ERROR: Invalid flags or arguments. Mirrors ``EX_USAGE (64)``.
        ENCODING_ERROR: A file is not valid UTF-8. Mirrors ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors ``EX_NOINPUT (66)``.
        IO_ERROR: Reading or writing a file failed. Mirrors ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors ``EX_NOPERM (77)``.
        CONFIG_ERROR: Malformed or missing configuration. Mirrors ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Anything else.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
