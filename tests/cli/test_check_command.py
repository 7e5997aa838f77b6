# topmark:header:start
#
#   project      : Ante
#   file         : test_check_command.py
#   file_relpath : tests/cli/test_check_command.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""`ante check`: reporting, exit codes and the JSON report."""

from __future__ import annotations

import datetime as _dt
import json
from typing import TYPE_CHECKING

from ante.cli.exit_codes import ExitCode
from ante.core.contributors import Contributor
from ante.core.header import generate_header
from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, run_cli_in
from tests.conftest import make_config, mark_cli

if TYPE_CHECKING:
    from pathlib import Path

JANE = Contributor("Jane Doe", "jane@example.com")
THIS_YEAR = _dt.date.today().year


def write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def valid_file(spdx: str = "MIT") -> str:
    header = generate_header(make_config(spdx_license=spdx), [JANE], 2020, THIS_YEAR)
    return header + "\n\nexport {};\n"


@mark_cli
def test_missing_header_fails(project: Path) -> None:
    write(project / "src" / "a.ts", "export {};\n")
    result = run_cli_in(project, ["--no-color", "check"])
    assert_FAILURE(result)
    assert "[fail] src/a.ts" in result.output
    assert "  - No valid header found" in result.output
    assert "Checked 1 file(s)" in result.output
    assert "  Failed: 1" in result.output


@mark_cli
def test_valid_header_passes(project: Path) -> None:
    write(project / "src" / "a.ts", valid_file())
    write(project / "node_modules" / "dep" / "b.ts", "export {};\n")
    result = run_cli_in(project, ["--no-color", "check"])
    assert_SUCCESS(result)
    assert "[ok] src/a.ts" in result.output
    assert "node_modules" not in result.output
    assert "  Passed: 1" in result.output


@mark_cli
def test_quiet_hides_passing_files(project: Path) -> None:
    write(project / "a.ts", valid_file())
    write(project / "b.ts", "export {};\n")
    result = run_cli_in(project, ["--no-color", "-q", "check"])
    assert_FAILURE(result)
    assert "[ok]" not in result.output
    assert "[fail] b.ts" in result.output


@mark_cli
def test_license_mismatch_is_reported(project: Path) -> None:
    write(project / "a.ts", valid_file("Apache-2.0"))
    result = run_cli_in(project, ["--no-color", "check", "a.ts"])
    assert_FAILURE(result)
    assert "SPDX license 'Apache-2.0' does not match config 'MIT'" in result.output


@mark_cli
def test_json_report(project: Path) -> None:
    write(project / "a.ts", valid_file())
    write(project / "b.ts", "export {};\n")
    result = run_cli_in(project, ["check", "--format", "json"])
    assert_FAILURE(result)
    report = json.loads(result.output)
    assert report["totalFiles"] == 2
    assert report["passedFiles"] == 1
    assert report["failedFiles"] == 1
    assert report["files"][0] == {"path": "a.ts", "valid": True, "issues": []}
    assert report["files"][1]["issues"] == ["No valid header found"]


@mark_cli
def test_include_option_replaces_configured_globs(project: Path) -> None:
    write(project / "a.ts", "export {};\n")
    write(project / "notes.md", valid_file())
    result = run_cli_in(project, ["--no-color", "check", "--include", "**/*.md"])
    assert_SUCCESS(result)
    assert "[ok] notes.md" in result.output
    assert "a.ts" not in result.output


@mark_cli
def test_malformed_config_is_a_config_error(project: Path) -> None:
    (project / "ante.toml").write_text("width = [\n", encoding="utf-8")
    result = run_cli_in(project, ["check"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Invalid TOML" in result.output


@mark_cli
def test_config_warnings_are_printed(project: Path) -> None:
    (project / "ante.toml").write_text("width = -5\n", encoding="utf-8")
    write(project / "a.ts", valid_file())
    result = run_cli_in(project, ["--no-color", "check"])
    assert "[warning]" in result.output
