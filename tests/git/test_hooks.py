# topmark:header:start
#
#   project      : Ante
#   file         : test_hooks.py
#   file_relpath : tests/git/test_hooks.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Pre-commit hook generation, installation and removal."""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

import pytest

from ante.constants import HOOK_MARKER, HOOKS_DIR_NAME
from ante.git.history import GitError, get_git_config
from ante.git.hooks import (
    generate_pre_commit_hook,
    hook_path,
    install_hook,
    is_ante_hook,
    uninstall_hook,
)
from tests.conftest import mark_git

if TYPE_CHECKING:
    from pathlib import Path


def test_hook_script_runs_staged_fix() -> None:
    script = generate_pre_commit_hook()
    assert script.startswith("#!/bin/sh\n")
    assert HOOK_MARKER in script
    assert "exec ante fix --staged\n" in script


def test_hook_script_quotes_config_path() -> None:
    script = generate_pre_commit_hook("conf/my ante.toml")
    assert "exec ante fix --staged --config 'conf/my ante.toml'" in script


def test_is_ante_hook(tmp_path: Path) -> None:
    foreign = tmp_path / "foreign"
    foreign.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    ours = tmp_path / "ours"
    ours.write_text(generate_pre_commit_hook(), encoding="utf-8")
    assert is_ante_hook(ours)
    assert not is_ante_hook(foreign)
    assert not is_ante_hook(tmp_path / "missing")


@mark_git
def test_install_hook_writes_executable_and_sets_hooks_path(git_repo: Path) -> None:
    path = install_hook(git_repo)
    assert path == hook_path(git_repo)
    assert path.parent.name == HOOKS_DIR_NAME
    assert is_ante_hook(path)
    if os.name == "posix":
        assert path.stat().st_mode & stat.S_IXUSR
    assert get_git_config("core.hooksPath", git_repo) == HOOKS_DIR_NAME

    # Reinstalling over our own hook is fine
    assert install_hook(git_repo, config_path="ante.toml") == path
    assert "--config ante.toml" in path.read_text(encoding="utf-8")


@mark_git
def test_install_hook_refuses_foreign_hook(git_repo: Path) -> None:
    path = hook_path(git_repo)
    path.parent.mkdir()
    path.write_text("#!/bin/sh\necho custom\n", encoding="utf-8")

    with pytest.raises(GitError, match="not installed by ante"):
        install_hook(git_repo)
    assert "custom" in path.read_text(encoding="utf-8")

    install_hook(git_repo, force=True)
    assert is_ante_hook(path)


def test_install_hook_outside_repository_fails(tmp_path: Path) -> None:
    with pytest.raises(GitError):
        install_hook(tmp_path)


@mark_git
def test_uninstall_hook(git_repo: Path) -> None:
    install_hook(git_repo)
    assert uninstall_hook(git_repo)
    assert not hook_path(git_repo).exists()
    assert not (git_repo / HOOKS_DIR_NAME).exists()
    assert get_git_config("core.hooksPath", git_repo) is None
    assert not uninstall_hook(git_repo)


@mark_git
def test_uninstall_hook_leaves_foreign_hook(git_repo: Path) -> None:
    path = hook_path(git_repo)
    path.parent.mkdir()
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    assert not uninstall_hook(git_repo)
    assert path.exists()
