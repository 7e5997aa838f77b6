# topmark:header:start
#
#   project      : Ante
#   file         : test_contributors.py
#   file_relpath : tests/core/test_contributors.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Contributor identity, merging and strategy-based selection."""

from __future__ import annotations

from pathlib import Path

import pytest

from ante.core.contributors import (
    Contributor,
    ContributorSelection,
    contains_contributor,
    format_contributor,
    merge_contributors,
    select_contributors,
)
from tests.conftest import make_config

JANE = Contributor("Jane Doe", "jane@example.com")
JOHN = Contributor("John Roe", "john@example.com")
ALEX = Contributor("Alex Poe", "alex@example.com")


class FakeHistory:
    """In-memory contributor history recording how it was called."""

    def __init__(self, ranked: list[Contributor]) -> None:
        self.ranked = ranked
        self.calls: list[tuple[Path, ContributorSelection, int]] = []

    def contributors_for(
        self,
        path: Path,
        strategy: ContributorSelection,
        limit: int,
    ) -> list[Contributor]:
        self.calls.append((path, strategy, limit))
        return list(self.ranked)


def test_contributor_key_is_lowercased_email() -> None:
    assert Contributor("X", "Jane@Example.COM").key == "jane@example.com"
    assert JANE.to_dict() == {"name": "Jane Doe", "email": "jane@example.com"}


def test_format_contributor() -> None:
    assert format_contributor(JANE) == "Jane Doe <jane@example.com>"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("commits", ContributorSelection.COMMITS),
        (" Lines ", ContributorSelection.LINES),
        ("RECENT", ContributorSelection.RECENT),
        ("manual", ContributorSelection.MANUAL),
        ("random", None),
        (None, None),
    ],
)
def test_selection_from_name(value: str | None, expected: ContributorSelection | None) -> None:
    assert ContributorSelection.from_name(value) is expected


def test_contains_contributor_ignores_case() -> None:
    assert contains_contributor([JANE, JOHN], "JOHN@example.com")
    assert not contains_contributor([JANE], "john@example.com")
    assert not contains_contributor([], "jane@example.com")


def test_merge_keeps_order_and_first_occurrence() -> None:
    renamed_jane = Contributor("J. Doe", "JANE@example.com")
    merged = merge_contributors([JANE, JOHN], [renamed_jane, ALEX, JOHN])
    assert merged == [JANE, JOHN, ALEX]


def test_merge_deduplicates_within_existing() -> None:
    assert merge_contributors([JANE, JANE], []) == [JANE]


def test_select_manual_uses_configured_list() -> None:
    config = make_config(
        contributor_selection="manual",
        manual_contributors=[JANE, JOHN, ALEX],
        max_contributors=2,
    )
    history = FakeHistory([ALEX])
    assert select_contributors(Path("a.ts"), config, history) == [JANE, JOHN]
    assert history.calls == []


def test_select_history_strategy_passes_limit() -> None:
    config = make_config(contributor_selection="lines", max_contributors=2)
    history = FakeHistory([ALEX, JANE, JOHN])
    selected = select_contributors(Path("src/a.ts"), config, history)
    assert selected == [ALEX, JANE]
    assert history.calls == [(Path("src/a.ts"), ContributorSelection.LINES, 2)]


def test_select_without_history_is_empty() -> None:
    assert select_contributors(Path("a.ts"), make_config(), None) == []


def test_select_with_zero_limit_is_empty() -> None:
    config = make_config(contributor_selection="manual", manual_contributors=[JANE], max_contributors=0)
    assert select_contributors(Path("a.ts"), config, None) == []
