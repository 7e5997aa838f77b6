# topmark:header:start
#
#   project      : Ante
#   file         : fix.py
#   file_relpath : src/ante/cli/commands/fix.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Ante `fix` command.

Creates missing headers and brings existing ones up to date: the year range
is extended to the current year, the current git user is credited, and the
layout and license lines are regenerated from the configuration.

Files are processed one after the other because results are printed (and
written) as they come.

Examples:
  Preview which files would change:

    $ ante fix --dry-run --diff

  Update the staged files of a commit (what the pre-commit hook runs):

    $ ante fix --staged
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from ante.cli.cmd_common import get_console, get_verbosity, pluralize
from ante.cli.config_resolver import resolve_config_from_click
from ante.cli.errors import AnteUsageError, error_for_os_error
from ante.cli.exit_codes import ExitCode
from ante.cli.options import CONTEXT_SETTINGS, common_config_options, common_filter_options
from ante.config.logging import get_logger
from ante.core.glob import filter_paths
from ante.files import discover_files, write_source
from ante.fixer import FixAction, FixResult, HeaderFixer
from ante.git.history import (
    GitHistory,
    get_current_git_user,
    get_file_year_range,
    get_repo_root,
    get_staged_files,
    stage_file,
)
from ante.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from ante.cli.console import ConsoleLike
    from ante.config.logging import AnteLogger
    from ante.config.model import Config

logger: AnteLogger = get_logger(__name__)

_ACTION_MARKERS: dict[FixAction, str] = {
    FixAction.CREATED: "+",
    FixAction.UPDATED: "~",
    FixAction.SKIPPED: "!",
    FixAction.UNCHANGED: " ",
}


def _staged_selection(config: Config) -> tuple[Path, list[str]]:
    root = get_repo_root(Path.cwd())
    if root is None:
        raise AnteUsageError("--staged requires a git repository")
    staged = get_staged_files(cwd=root)
    return root, filter_paths(staged, config.include, config.exclude)


def _report(console: ConsoleLike, result: FixResult, *, vlevel: int, dry_run: bool) -> None:
    if vlevel > 0:
        console.print(f"{_ACTION_MARKERS[result.action]} {result.path}")
        if result.details:
            console.print(f"  {result.details}")
    elif result.modified and vlevel >= 0:
        label = "Would fix" if dry_run else "Fixed"
        console.print(f"{label}: {result.path}")


@click.command(
    name="fix",
    help="Add missing copyright headers and update existing ones.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
With --dry-run nothing is written and the exit code is 2 when files would change.

  # Fix everything below the current directory
  ante fix

  # Show what would change
  ante fix --dry-run --diff src
""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=str))
@common_filter_options
@common_config_options
@click.option("--dry-run", "dry_run", is_flag=True, help="Do not write any file.")
@click.option("--diff", "show_diff", is_flag=True, help="Show unified diffs of the changes.")
@click.option(
    "--staged",
    is_flag=True,
    help="Process staged files and stage the updated ones again (pre-commit hook mode).",
)
def fix_command(
    *,
    paths: tuple[str, ...],
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    config_path: str | None,
    dry_run: bool,
    show_diff: bool,
    staged: bool,
) -> None:
    """Create or update the headers of PATHS (the current directory by default).

    Args:
        paths (tuple[str, ...]): Files or directories to fix.
        include_patterns (tuple[str, ...]): ``--include`` globs.
        exclude_patterns (tuple[str, ...]): ``--exclude`` globs.
        config_path (str | None): Explicit config file.
        dry_run (bool): Compute changes without writing them.
        show_diff (bool): Print a unified diff per modified file.
        staged (bool): Work on the git staging area instead of PATHS.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_verbosity(ctx)
    color = bool(ctx.obj.get("color_enabled", False))

    if staged and paths:
        raise AnteUsageError("PATHS cannot be combined with --staged")

    config = resolve_config_from_click(
        console=console,
        verbosity_level=vlevel,
        config_path=config_path,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
    )

    if staged:
        base, files = _staged_selection(config)
    else:
        base = Path.cwd()
        files = discover_files(paths, config.include, config.exclude, base=base)

    if vlevel > 0:
        console.print(f"Found {pluralize(len(files), 'file')} to process")
        if dry_run:
            console.print("(dry run - no changes will be made)")

    current_user = get_current_git_user(base)
    if current_user is None and vlevel > 0:
        console.warn("Warning: Could not determine git user")

    fixer = HeaderFixer(
        config=config,
        current_user=current_user,
        history=GitHistory(),
        year_lookup=get_file_year_range,
    )

    results: list[FixResult] = []
    error_code: ExitCode | None = None
    for rel in files:
        path = base / rel
        result = fixer.fix_file(path, rel)
        if result.modified and not dry_run and result.updated is not None:
            try:
                write_source(path, result.updated, result.newline)
            except OSError as e:
                err = error_for_os_error(rel, e)
                logger.error("Cannot write %s: %s", path, e)
                console.error(f"Error: {err.format_message()}")
                error_code = error_code or ExitCode(err.exit_code)
                result = FixResult(rel, FixAction.SKIPPED, f"Error: {e}")
            else:
                if staged and not stage_file(path):
                    console.warn(f"Warning: could not re-stage {rel}")
        results.append(result)

        _report(console, result, vlevel=vlevel, dry_run=dry_run)
        if show_diff and result.modified and result.original is not None:
            patch = unified_diff(result.original, result.updated or "", rel)
            console.print(render_patch(patch, color=color), nl=False)

    counts = {action: 0 for action in FixAction}
    for result in results:
        counts[result.action] += 1
    changed = counts[FixAction.CREATED] + counts[FixAction.UPDATED]

    if vlevel > 0 or changed > 0:
        console.print()
        console.print(f"Processed {len(files)} file(s)")
        console.print(f"  Created: {counts[FixAction.CREATED]}")
        console.print(f"  Updated: {counts[FixAction.UPDATED]}")
        console.print(f"  Unchanged: {counts[FixAction.UNCHANGED]}")
        console.print(f"  Skipped: {counts[FixAction.SKIPPED]}")

    if error_code is not None:
        ctx.exit(error_code)
    if dry_run and changed > 0:
        ctx.exit(ExitCode.WOULD_CHANGE)
