# topmark:header:start
#
#   project      : Ante
#   file         : errors.py
#   file_relpath : src/ante/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Exceptions for the Ante CLI.

Each exception carries the exit code Click uses when it aborts the command.
`AnteError.show` prints through the project console when one is attached to
the Click context.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from ante.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


class AnteError(click.ClickException):
    """Base class for all Ante CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain message; color is applied in `show`."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class AnteUsageError(AnteError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class AnteConfigError(AnteError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class AnteFileNotFoundError(AnteError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class AntePermissionDeniedError(AnteError):
    """Insufficient permissions to read or write."""

    exit_code = ExitCode.PERMISSION_DENIED


class AnteIOError(AnteError):
    """Reading or writing a file failed."""

    exit_code = ExitCode.IO_ERROR


class AnteEncodingError(AnteError):
    """A file is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class AnteUnexpectedError(AnteError):
    """Last-resort error for anything unclassified."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def error_for_os_error(path: Path | str, exc: OSError | UnicodeError) -> AnteError:
    """Map a file-level exception to the matching CLI error."""
    if isinstance(exc, UnicodeError):
        return AnteEncodingError(f"{path}: not valid UTF-8 ({exc})")
    if isinstance(exc, FileNotFoundError):
        return AnteFileNotFoundError(f"{path}: no such file")
    if isinstance(exc, PermissionError):
        return AntePermissionDeniedError(f"{path}: permission denied")
    return AnteIOError(f"{path}: {exc}")
