# topmark:header:start
#
#   project      : Ante
#   file         : cmd_common.py
#   file_relpath : src/ante/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by several commands. They hold no policy
(exit codes, messages); commands decide that themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ante.cli.console import ClickConsole
from ante.config.logging import get_logger

if TYPE_CHECKING:
    from ante.cli.console import ConsoleLike
    from ante.config.logging import AnteLogger

logger: AnteLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console set up by the group, or a plain one when run standalone."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity level (-1 quiet, 0 terse, 1-2 verbose)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def pluralize(count: int, word: str) -> str:
    """Return ``"1 file"`` or ``"3 files"``."""
    return f"{count} {word}" if count == 1 else f"{count} {word}s"
