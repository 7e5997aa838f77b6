# topmark:header:start
#
#   project      : Ante
#   file         : check.py
#   file_relpath : src/ante/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Ante `check` command.

Validates the header of every selected file without modifying anything.

Examples:
  Check the current directory:

    $ ante check

  Check two directories and emit a JSON report:

    $ ante check --format json src tests
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

import click

from ante.checker import check_files
from ante.cli.cmd_common import get_console, get_verbosity, pluralize
from ante.cli.config_resolver import resolve_config_from_click
from ante.cli.exit_codes import ExitCode
from ante.cli.options import CONTEXT_SETTINGS, common_config_options, common_filter_options
from ante.files import discover_files


class OutputFormat(str, Enum):
    """Report formats of the `check` command."""

    HUMAN = "human"
    JSON = "json"


@click.command(
    name="check",
    help="Validate copyright headers without modifying files.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Exits with 1 when at least one file has a missing or invalid header.

  # Check everything below the current directory
  ante check

  # Machine-readable report
  ante check --format json src
""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=str))
@common_filter_options
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="Report format.",
)
def check_command(
    *,
    paths: tuple[str, ...],
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    config_path: str | None,
    output_format: str,
) -> None:
    """Validate the headers of PATHS (the current directory by default).

    Args:
        paths (tuple[str, ...]): Files or directories to check.
        include_patterns (tuple[str, ...]): ``--include`` globs.
        exclude_patterns (tuple[str, ...]): ``--exclude`` globs.
        config_path (str | None): Explicit config file.
        output_format (str): ``human`` or ``json``.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_verbosity(ctx)
    fmt = OutputFormat(output_format)

    config = resolve_config_from_click(
        console=console,
        verbosity_level=vlevel,
        config_path=config_path,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
    )

    base = Path.cwd()
    files = discover_files(paths, config.include, config.exclude, base=base)
    if fmt is OutputFormat.HUMAN and vlevel > 0:
        console.print(f"Found {pluralize(len(files), 'file')} to check")

    summary = check_files(files, config, base=base)

    if fmt is OutputFormat.JSON:
        console.print(json.dumps(summary.to_dict(), indent=2))
    else:
        for result in summary.files:
            if result.valid:
                if vlevel >= 0:
                    console.print(f"{console.styled('[ok]', fg='green')} {result.path}")
                continue
            console.print(f"{console.styled('[fail]', fg='red', bold=True)} {result.path}")
            for issue in result.issues:
                console.print(f"  - {issue}")

        console.print()
        console.print(f"Checked {summary.total_files} file(s)")
        console.print(f"  Passed: {summary.passed_files}")
        console.print(f"  Failed: {summary.failed_files}")

    if summary.failed_files:
        ctx.exit(ExitCode.FAILURE)
