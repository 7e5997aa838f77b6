# topmark:header:start
#
#   project      : Ante
#   file         : test_glob.py
#   file_relpath : tests/core/test_glob.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Glob matching and include/exclude filtering."""

from __future__ import annotations

import pytest

from ante.core.glob import compile_glob, filter_paths, glob_to_regex, matches_any_glob, matches_glob


@pytest.mark.parametrize(
    ("path", "pattern", "expected"),
    [
        ("test.ts", "*.ts", True),
        ("src/test.ts", "*.ts", False),
        ("utils.test.ts", "*.test.ts", True),
        ("helper.ts", "test_*.ts", False),
        ("a/b.ts", "a*.ts", False),
        ("file.ts", "**/*.ts", True),
        ("a/b/c/d/file.ts", "**/*.ts", True),
        ("dist/bundle.js", "**/dist/**", True),
        ("a/b/dist/c/d.js", "**/dist/**", True),
        ("src/lib/file.ts", "src/**", True),
        ("src", "src/**", False),
        ("src/file.ts", "**/node_modules/**", False),
        ("a.ts", "?.ts", True),
        ("ab.ts", "?.ts", False),
        ("a/b.ts", "?/b.ts", True),
        ("src/lib/utils.ts", "src/*/*.ts", True),
        ("src/a/b/utils.ts", "src/*/*.ts", False),
        ("lib/components/Button.tsx", "src/**/*.tsx", False),
        ("test12.spec.ts", "test?.*.ts", False),
        ("src/.hidden", "**/.hidden", True),
        ("./src/file.ts", "./**/*.ts", True),
    ],
)
def test_matches_glob(path: str, pattern: str, expected: bool) -> None:
    """Globstar, star and question mark follow path-segment rules."""
    assert matches_glob(path, pattern) is expected


@pytest.mark.parametrize(
    "name",
    ["file(1).ts", "file[0].ts", "file+name.ts", "a{b}.ts", "x|y.ts", "cost$.ts", "a^b.ts"],
)
def test_regex_metacharacters_match_literally(name: str) -> None:
    """Regex metacharacters in a pattern only match themselves."""
    assert matches_glob(name, name)
    assert not matches_glob("fileX1Y.ts", "file(1).ts")


def test_empty_pattern_matches_only_empty_path() -> None:
    assert matches_glob("", "")
    assert not matches_glob("file.ts", "")


def test_match_is_anchored() -> None:
    """Patterns match whole paths, never substrings."""
    assert not matches_glob("src/file.ts.bak", "**/*.ts")
    assert glob_to_regex("*.ts").pattern.startswith("^")


def test_compile_glob_returns_predicate() -> None:
    is_ts = compile_glob("**/*.ts")
    assert is_ts("deep/nested/file.ts")
    assert not is_ts("deep/nested/file.js")


def test_matches_any_glob_with_no_patterns_is_false() -> None:
    assert not matches_any_glob("file.ts", [])
    assert matches_any_glob("file.ts", ["*.js", "*.ts"])


def test_filter_paths_exclusion_wins() -> None:
    """A path matching both lists is excluded; order is preserved."""
    paths = ["src/b.ts", "node_modules/x/index.ts", "src/a.ts", "README.md"]
    result = filter_paths(paths, ["**/*.ts"], ["**/node_modules/**"])
    assert result == ["src/b.ts", "src/a.ts"]


def test_filter_paths_without_includes_keeps_nothing() -> None:
    assert filter_paths(["a.ts", "b.ts"], []) == []
