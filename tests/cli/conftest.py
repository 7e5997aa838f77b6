# topmark:header:start
#
#   project      : Ante
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""CLI test helpers for running Ante in a controlled working directory.

`run_cli_in()` changes the process working directory to the given path
before invoking the Click CLI, so relative paths and globs resolve against
the test's project directory, the way users run Ante from a project root.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from ante.cli.exit_codes import ExitCode
from ante.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    cwd: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory to run the command from.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["check", "src"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input (prompt answers).

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(previous)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on files (``--help``,
    ``version``) or when every path passed is absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2).

    WOULD_CHANGE is a normal outcome; Click's own usage errors also exit
    with 2, so the absence of an exception is checked too.
    """
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


PROJECT_CONFIG = """\
spdx_license = "MIT"
contributor_selection = "manual"
manual_contributors = [{ name = "Jane Doe", email = "jane@example.com" }]
"""


@pytest.fixture
def project(isolation: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty project with a manual-contributor ``ante.toml`` and no git identity.

    Global and system git configuration are hidden so headers only credit the
    configured contributor, whatever the machine running the tests has set up.

    Returns:
        Path: The project directory, also the current working directory.
    """
    home: Path = isolation.parent / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(home / ".gitconfig"))
    (isolation / "ante.toml").write_text(PROJECT_CONFIG, encoding="utf-8")
    return isolation
