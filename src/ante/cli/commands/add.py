# topmark:header:start
#
#   project      : Ante
#   file         : add.py
#   file_relpath : src/ante/cli/commands/add.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Ante `add` command.

Adds a copyright header to a single file, ignoring include/exclude
patterns. A file that already has a valid header is left alone unless
``--force`` is given, in which case its header is regenerated.
"""

from __future__ import annotations

from pathlib import Path

import click

from ante.cli.cmd_common import get_console, get_verbosity
from ante.cli.config_resolver import resolve_config_from_click
from ante.cli.errors import error_for_os_error
from ante.cli.exit_codes import ExitCode
from ante.cli.options import CONTEXT_SETTINGS, common_config_options
from ante.config.logging import AnteLogger, get_logger
from ante.core.header import has_valid_header
from ante.files import read_source, split_preamble, write_source
from ante.fixer import HeaderFixer
from ante.git.history import GitHistory, get_current_git_user, get_file_year_range

logger: AnteLogger = get_logger(__name__)


@click.command(
    name="add",
    help="Add a copyright header to a single file.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--force", is_flag=True, help="Replace an existing valid header.")
@common_config_options
def add_command(*, file: Path, force: bool, config_path: str | None) -> None:
    """Add a copyright header to FILE.

    Args:
        file (Path): The file to add a header to.
        force (bool): Regenerate the header even when a valid one exists.
        config_path (str | None): Explicit config file.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_verbosity(ctx)

    config = resolve_config_from_click(
        console=console,
        verbosity_level=vlevel,
        config_path=config_path,
        start=file.parent,
    )

    try:
        source = read_source(file)
    except (OSError, UnicodeDecodeError) as e:
        raise error_for_os_error(file, e) from e

    fixer = HeaderFixer(
        config=config,
        current_user=get_current_git_user(file.parent),
        history=GitHistory(),
        year_lookup=get_file_year_range,
    )

    _, body = split_preamble(source.text)
    if has_valid_header(body, fixer.syntax) and not force:
        console.error(f"{file} already has a copyright header (use --force to replace it)")
        ctx.exit(ExitCode.FAILURE)

    new_content = fixer.create_content(file, source.text)
    if new_content == source.text:
        logger.debug("%s: header already up to date", file)
        console.print(f"Unchanged: {file}")
        return

    try:
        write_source(file, new_content, source.newline)
    except OSError as e:
        raise error_for_os_error(file, e) from e
    console.print(f"Added header to {file}")
