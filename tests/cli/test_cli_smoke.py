# topmark:header:start
#
#   project      : Ante
#   file         : test_cli_smoke.py
#   file_relpath : tests/cli/test_cli_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Smoke tests for the top-level CLI group and the `version` command."""

from __future__ import annotations

import pytest

from ante.cli.exit_codes import ExitCode
from ante.constants import ANTE_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_help_lists_commands() -> None:
    result = run_cli(["--help"])
    assert_SUCCESS(result)
    for name in ("add", "check", "fix", "init", "version"):
        assert name in result.output


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint: use 'ante check" in result.output
    assert "Usage:" in result.output


@mark_cli
def test_version_plain() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == ANTE_VERSION


@mark_cli
def test_version_verbose() -> None:
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert "Ante version:" in result.output
    assert ANTE_VERSION in result.output


@mark_cli
def test_verbose_and_quiet_conflict() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output


@mark_cli
@pytest.mark.parametrize("command", ["check", "fix", "add", "init"])
def test_subcommand_help(command: str) -> None:
    result = run_cli([command, "-h"])
    assert_SUCCESS(result)
    assert "Usage:" in result.output
