# topmark:header:start
#
#   project      : Ante
#   file         : version.py
#   file_relpath : src/ante/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Ante `version` command.

Prints the Ante version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from ante.cli.cmd_common import get_console, get_verbosity
from ante.constants import ANTE_VERSION


@click.command(
    name="version",
    help="Show the current version of Ante.",
)
def version_command() -> None:
    """Show the current version of Ante."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if get_verbosity(ctx) > 0:
        console.print(console.styled("Ante version:", bold=True, underline=True))
        console.print(f"    {console.styled(ANTE_VERSION, bold=True)}")
    else:
        console.print(console.styled(ANTE_VERSION, bold=True))
