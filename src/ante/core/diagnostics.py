# topmark:header:start
#
#   project      : Ante
#   file         : diagnostics.py
#   file_relpath : src/ante/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Diagnostics collected while resolving configuration."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity of a diagnostic, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for human-readable output."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A message with a severity level."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = True) -> str:
        """Return ``"[level] message"``, colored when ``color`` is True."""
        text = f"[{self.level.value}] {self.message}"
        return self.level.color(text) if color else text


@dataclass(frozen=True)
class DiagnosticStats:
    """Counts of diagnostics per severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        return self.n_info + self.n_warning + self.n_error


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    return DiagnosticStats(
        n_info=sum(1 for d in diags if d.level is DiagnosticLevel.INFO),
        n_warning=sum(1 for d in diags if d.level is DiagnosticLevel.WARNING),
        n_error=sum(1 for d in diags if d.level is DiagnosticLevel.ERROR),
    )
