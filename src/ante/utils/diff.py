# topmark:header:start
#
#   project      : Ante
#   file         : diff.py
#   file_relpath : src/ante/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Unified diffs of header changes, plain or colorized."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from ante.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ante.config.logging import AnteLogger

logger: AnteLogger = get_logger(__name__)


def unified_diff(before: str, after: str, path: str, context: int = 3) -> list[str]:
    """Return the unified diff of two ``\\n``-separated texts as a list of lines.

    Lines carry no trailing newline. An empty list means the texts are equal.
    """
    return list(
        difflib.unified_diff(
            before.split("\n"),
            after.split("\n"),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
            n=context,
            lineterm="",
        )
    )


def render_patch(patch: Sequence[str] | str, *, color: bool = True) -> str:
    """Render a unified diff for the terminal.

    Args:
        patch (Sequence[str] | str): Diff lines, or the diff as one multiline string.
        color (bool): Colorize added and removed lines with `yachalk`.

    Returns:
        str: The rendered diff, one line per input line, newline-terminated.
    """
    lines: list[str] = patch.splitlines() if isinstance(patch, str) else list(patch)

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        if not color or not line:
            return content
        match line[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    return "".join(f"{process_line(line)}\n" for line in lines)
