# topmark:header:start
#
#   project      : Ante
#   file         : hooks.py
#   file_relpath : src/ante/git/hooks.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Install and remove the Ante pre-commit hook.

The hook lives in ``.githooks/pre-commit`` inside the project and git is
pointed at it through ``core.hooksPath``. On every commit it runs
``ante fix --staged``, which updates the headers of staged files and stages
the result again.
"""

from __future__ import annotations

import shlex
import stat
from pathlib import Path

from ante.config.logging import AnteLogger, get_logger
from ante.constants import HOOK_MARKER, HOOKS_DIR_NAME, PRE_COMMIT_HOOK_NAME
from ante.git.history import GitError, get_git_config, run_git, run_git_checked

logger: AnteLogger = get_logger(__name__)


def generate_pre_commit_hook(config_path: str | None = None) -> str:
    """Return the pre-commit hook script.

    Args:
        config_path (str | None): Config file passed to ``ante fix`` via ``--config``.

    Returns:
        str: A POSIX shell script carrying the Ante hook marker.
    """
    command = "ante fix --staged"
    if config_path:
        command += f" --config {shlex.quote(config_path)}"
    return "\n".join(
        [
            "#!/bin/sh",
            HOOK_MARKER,
            "# Updates copyright headers of staged files. Installed by `ante init`.",
            "",
            "if ! command -v ante >/dev/null 2>&1; then",
            '    echo "ante: not found on PATH, skipping header update" >&2',
            "    exit 0",
            "fi",
            "",
            f"exec {command}",
            "",
        ]
    )


def hook_path(target_dir: Path) -> Path:
    """Return where the pre-commit hook is installed for ``target_dir``."""
    return target_dir / HOOKS_DIR_NAME / PRE_COMMIT_HOOK_NAME


def is_ante_hook(path: Path) -> bool:
    """Return True if ``path`` is a hook script written by Ante."""
    try:
        return HOOK_MARKER in path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return False


def install_hook(
    target_dir: Path,
    *,
    config_path: str | None = None,
    force: bool = False,
) -> Path:
    """Write the pre-commit hook and point ``core.hooksPath`` at it.

    Args:
        target_dir (Path): Repository working tree.
        config_path (str | None): Optional config file forwarded to the hook.
        force (bool): Overwrite a pre-commit hook that was not written by Ante.

    Returns:
        Path: The installed hook file.

    Raises:
        GitError: If a foreign hook is in the way, or git cannot be configured.
    """
    path = hook_path(target_dir)
    if path.exists() and not force and not is_ante_hook(path):
        raise GitError(f"{path} exists and was not installed by ante; use --force to replace it")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_pre_commit_hook(config_path), encoding="utf-8", newline="\n")
    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    logger.info("Wrote pre-commit hook %s", path)

    run_git_checked(["config", "core.hooksPath", HOOKS_DIR_NAME], target_dir)
    logger.info("Set core.hooksPath to %s", HOOKS_DIR_NAME)
    return path


def uninstall_hook(target_dir: Path) -> bool:
    """Remove the Ante pre-commit hook and reset ``core.hooksPath``.

    Foreign hooks are left alone. ``core.hooksPath`` is only unset when it
    still points at the Ante hooks directory.

    Returns:
        bool: True if a hook file was removed.
    """
    path = hook_path(target_dir)
    removed = False
    if path.exists() and is_ante_hook(path):
        path.unlink()
        removed = True
        logger.info("Removed pre-commit hook %s", path)
        try:
            path.parent.rmdir()
        except OSError:
            logger.debug("Keeping non-empty %s", path.parent)

    if get_git_config("core.hooksPath", target_dir) == HOOKS_DIR_NAME:
        run_git(["config", "--unset", "core.hooksPath"], target_dir)
        logger.info("Unset core.hooksPath")
    return removed
