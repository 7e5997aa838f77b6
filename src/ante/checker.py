# topmark:header:start
#
#   project      : Ante
#   file         : checker.py
#   file_relpath : src/ante/checker.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Validate the headers of many files concurrently.

Each file is read and validated independently; the header engine keeps no
state between calls, so files are spread over a thread pool. Results come
back in input order.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ante.config.logging import get_logger
from ante.core.header import validate_header
from ante.files import read_source, split_preamble

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ante.config.logging import AnteLogger
    from ante.config.model import Config

logger: AnteLogger = get_logger(__name__)


@dataclass(frozen=True)
class FileCheckResult:
    """Validation outcome for one file."""

    path: str
    valid: bool
    issues: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "valid": self.valid, "issues": list(self.issues)}


@dataclass(frozen=True)
class CheckSummary:
    """Aggregated results of a check run."""

    files: tuple[FileCheckResult, ...] = field(default_factory=tuple)

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def passed_files(self) -> int:
        return sum(1 for r in self.files if r.valid)

    @property
    def failed_files(self) -> int:
        return self.total_files - self.passed_files

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON report: totals plus one entry per file."""
        return {
            "totalFiles": self.total_files,
            "passedFiles": self.passed_files,
            "failedFiles": self.failed_files,
            "files": [r.to_dict() for r in self.files],
        }


def check_file(
    path: Path,
    config: Config,
    display_path: str | None = None,
    *,
    current_year: int | None = None,
) -> FileCheckResult:
    """Validate the header of one file.

    Unreadable files fail with a single ``Failed to read file`` issue.
    """
    shown = display_path or str(path)
    try:
        source = read_source(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", path, e)
        return FileCheckResult(shown, False, (f"Failed to read file: {e}",))

    _, body = split_preamble(source.text)
    validation = validate_header(body, config, current_year=current_year)
    return FileCheckResult(shown, validation.valid, validation.issues)


def check_files(
    paths: Sequence[str],
    config: Config,
    *,
    base: Path | None = None,
    max_workers: int | None = None,
    current_year: int | None = None,
) -> CheckSummary:
    """Validate ``paths`` (relative to ``base``) on a thread pool.

    Args:
        paths (Sequence[str]): Files to check; reported as given.
        config (Config): Resolved configuration.
        base (Path | None): Directory the paths are relative to; the CWD when None.
        max_workers (int | None): Pool size; scaled to the CPU count when None.
        current_year (int | None): Reference year for the "in the future" checks.

    Returns:
        CheckSummary: Results in the order of ``paths``.
    """
    root = base or Path.cwd()
    workers = max_workers or min(32, (os.cpu_count() or 1) + 4)

    def _one(rel: str) -> FileCheckResult:
        return check_file(root / rel, config, rel, current_year=current_year)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = tuple(executor.map(_one, paths))
    logger.debug("Checked %d file(s) with %d worker(s)", len(results), workers)
    return CheckSummary(files=results)
