# topmark:header:start
#
#   project      : Ante
#   file         : test_checker.py
#   file_relpath : tests/test_checker.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Header validation over many files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ante.checker import check_file, check_files
from ante.core.contributors import Contributor
from ante.core.header import generate_header
from tests.conftest import make_config

if TYPE_CHECKING:
    from pathlib import Path

JANE = Contributor("Jane Doe", "jane@example.com")


def test_check_files_reports_in_input_order(tmp_path: Path) -> None:
    config = make_config(spdx_license="MIT")
    good = generate_header(config, [JANE], 2020, 2024) + "\n\nexport {};\n"
    names = [f"f{i}.ts" for i in range(12)]
    for i, name in enumerate(names):
        (tmp_path / name).write_text(good if i % 3 else "export {};\n", encoding="utf-8")

    summary = check_files(names, config, base=tmp_path, max_workers=4, current_year=2025)

    assert [r.path for r in summary.files] == names
    assert summary.total_files == 12
    assert summary.failed_files == 4
    assert summary.passed_files == 8
    assert summary.files[0].issues == ("No valid header found",)

    report = summary.to_dict()
    assert report["totalFiles"] == 12
    assert report["failedFiles"] == 4
    assert report["files"][1] == {"path": "f1.ts", "valid": True, "issues": []}


def test_check_file_license_mismatch_and_future_year(tmp_path: Path) -> None:
    header = generate_header(make_config(spdx_license="Apache-2.0"), [JANE], 2030)
    target = tmp_path / "a.ts"
    target.write_text(f"#!/usr/bin/env node\n{header}\n\nrun();\n", encoding="utf-8")

    result = check_file(target, make_config(spdx_license="MIT"), "a.ts", current_year=2025)
    assert not result.valid
    assert result.issues == (
        "Year 2030 is in the future",
        "End year 2030 is in the future",
        "SPDX license 'Apache-2.0' does not match config 'MIT'",
    )


def test_check_file_unreadable(tmp_path: Path) -> None:
    result = check_file(tmp_path / "missing.ts", make_config())
    assert not result.valid
    assert len(result.issues) == 1
    assert result.issues[0].startswith("Failed to read file:")
