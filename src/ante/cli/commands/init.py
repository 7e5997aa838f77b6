# topmark:header:start
#
#   project      : Ante
#   file         : init.py
#   file_relpath : src/ante/cli/commands/init.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Ante `init` command.

Sets up a project: writes a starter Ante configuration and installs the
pre-commit hook that keeps headers current on every commit.

The configuration goes into ``[tool.ante]`` of an existing
``pyproject.toml``, or into a new ``ante.toml`` otherwise. An existing Ante
section in any supported source is left untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from ante.cli.cmd_common import get_console
from ante.cli.errors import AnteConfigError
from ante.cli.options import CONTEXT_SETTINGS
from ante.config.io import ConfigError, add_toml_section
from ante.config.logging import get_logger
from ante.config.model import DEFAULT_CONTRIBUTOR_SELECTION, DEFAULT_MAX_CONTRIBUTORS, DEFAULT_WIDTH
from ante.config.sources import detect_project_license, read_config_source
from ante.constants import (
    ANTE_TOML_NAME,
    CONFIG_SECTION,
    HOOKS_DIR_NAME,
    JSON_MANIFEST_NAMES,
    PYPROJECT_TOML_NAME,
)
from ante.core.licenses import derive_license_url
from ante.git.history import GitError
from ante.git.hooks import install_hook

if TYPE_CHECKING:
    from ante.config.io import ConfigTable
    from ante.config.logging import AnteLogger

logger: AnteLogger = get_logger(__name__)


def default_ante_section(license_id: str | None = None) -> ConfigTable:
    """Return the starter Ante table, seeded with the project license if known."""
    section: ConfigTable = {
        "width": DEFAULT_WIDTH,
        "max_contributors": DEFAULT_MAX_CONTRIBUTORS,
        "contributor_selection": DEFAULT_CONTRIBUTOR_SELECTION.value,
    }
    if license_id:
        section["spdx_license"] = license_id
        section["license_url"] = derive_license_url(license_id)
    return section


def find_existing_section(target_dir: Path) -> Path | None:
    """Return the file in ``target_dir`` that already holds an Ante section."""
    for name in (ANTE_TOML_NAME, PYPROJECT_TOML_NAME, *JSON_MANIFEST_NAMES):
        source = read_config_source(target_dir / name, required=False)
        if source is not None:
            return source.path
    return None


def write_starter_config(target_dir: Path) -> tuple[Path, bool]:
    """Write the starter configuration into ``target_dir``.

    Returns:
        tuple[Path, bool]: The config file and whether it was written (False
            when an Ante section already existed).

    Raises:
        ConfigError: If an existing source cannot be parsed or the file cannot be written.
    """
    existing = find_existing_section(target_dir)
    if existing is not None:
        return existing, False

    section = default_ante_section(detect_project_license(target_dir))
    pyproject = target_dir / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        written = add_toml_section(pyproject, f"tool.{CONFIG_SECTION}", section)
        return pyproject, written

    ante_toml = target_dir / ANTE_TOML_NAME
    return ante_toml, add_toml_section(ante_toml, "", section)


@click.command(
    name="init",
    help="Create a starter configuration and install the git pre-commit hook.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--dir",
    "target_dir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Project directory (defaults to the current directory).",
)
@click.option("--skip-hooks", "skip_hooks", is_flag=True, help="Do not install the git hook.")
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Do not ask for confirmation.")
def init_command(*, target_dir: Path | None, skip_hooks: bool, assume_yes: bool) -> None:
    """Set up Ante in a project directory.

    Args:
        target_dir (Path | None): Project directory; the CWD when None.
        skip_hooks (bool): Skip the pre-commit hook installation.
        assume_yes (bool): Install the hook without prompting.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    target = (target_dir or Path.cwd()).resolve()

    console.print(f"Initializing ante in {target}...")

    try:
        config_file, written = write_starter_config(target)
    except ConfigError as e:
        raise AnteConfigError(str(e)) from e
    if written:
        console.print(f"  Created ante configuration in {config_file}")
    else:
        console.print(f"  ante configuration already exists in {config_file}")

    hooks_installed = False
    if skip_hooks:
        console.print("  Skipped git hook installation")
    elif not assume_yes and not click.confirm(
        f"  Install the pre-commit hook into {HOOKS_DIR_NAME}/?", default=True
    ):
        console.print("  Skipped git hook installation")
    else:
        try:
            install_hook(target)
        except (GitError, OSError) as e:
            logger.debug("Hook installation failed: %s", e)
            console.warn(f"  Warning: Failed to install git hooks: {e}")
        else:
            hooks_installed = True
            console.print(f"  Installed git hooks to {HOOKS_DIR_NAME}/")
            console.print(f"  Configured git to use {HOOKS_DIR_NAME}/ as hooks path")

    console.print()
    console.print("Done! ante is now configured.")

    if hooks_installed:
        console.print()
        console.print("The pre-commit hook will automatically:")
        console.print("  - Add copyright headers to new files")
        console.print("  - Add you as a contributor when you modify files")
        console.print("  - Update year ranges when files change")
