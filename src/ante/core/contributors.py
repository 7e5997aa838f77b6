# topmark:header:start
#
#   project      : Ante
#   file         : contributors.py
#   file_relpath : src/ante/core/contributors.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Contributor value type, merging, and selection.

A contributor is identified by email, compared case-insensitively. The
selection strategy only changes *who* is handed to the header engine; the
engine itself never looks at it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from ante.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from ante.config.logging import AnteLogger
    from ante.config.model import Config

logger: AnteLogger = get_logger(__name__)


@dataclass(frozen=True)
class Contributor:
    """A (name, email) pair credited in a header.

    Attributes:
        name (str): Display name.
        email (str): Email address; the contributor's identity.
    """

    name: str
    email: str

    @property
    def key(self) -> str:
        """Identity key: the lower-cased email."""
        return self.email.lower()

    def to_dict(self) -> dict[str, str]:
        """Return a plain dict suitable for TOML/JSON output."""
        return {"name": self.name, "email": self.email}


class ContributorSelection(str, Enum):
    """Strategy used to pick the contributors credited in a header.

    COMMITS: authors ranked by number of commits touching the file.
    LINES: authors ranked by number of lines added and removed.
    RECENT: authors ordered by their most recent commit.
    MANUAL: the configured ``manual_contributors`` list.
    """

    COMMITS = "commits"
    LINES = "lines"
    RECENT = "recent"
    MANUAL = "manual"

    @classmethod
    def from_name(cls, value: str | None) -> ContributorSelection | None:
        """Return the member for a case-insensitive value, or None if unknown."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class ContributorHistory(Protocol):
    """Source of ranked contributors for a file (normally git history)."""

    def contributors_for(
        self,
        path: Path,
        strategy: ContributorSelection,
        limit: int,
    ) -> list[Contributor]:
        """Return up to ``limit`` contributors for ``path`` ranked by ``strategy``."""
        ...


def contains_contributor(contributors: Iterable[Contributor], email: str) -> bool:
    """Return True if a contributor with ``email`` (any case) is present."""
    key = email.lower()
    return any(c.key == key for c in contributors)


def merge_contributors(
    existing: Iterable[Contributor],
    new_contributors: Iterable[Contributor],
) -> list[Contributor]:
    """Merge two contributor lists without duplicates.

    Existing entries come first, then new ones, in their original order. When
    two entries share an email (case-insensitive), the first one wins.
    """
    seen: set[str] = set()
    result: list[Contributor] = []
    for c in [*existing, *new_contributors]:
        if c.key in seen:
            continue
        seen.add(c.key)
        result.append(c)
    return result


def format_contributor(contributor: Contributor) -> str:
    """Format a contributor as ``Name <email>``."""
    return f"{contributor.name} <{contributor.email}>"


def select_contributors(
    path: Path,
    config: Config,
    history: ContributorHistory | None,
) -> list[Contributor]:
    """Select the contributors for ``path`` according to the configured strategy.

    Args:
        path (Path): The file whose header is being built.
        config (Config): Resolved configuration (strategy, limit, manual list).
        history (ContributorHistory | None): Where ranked contributors come from for the
            history-based strategies. ``None`` yields no contributors for those.

    Returns:
        list[Contributor]: At most ``config.max_contributors`` contributors.
    """
    limit = config.max_contributors
    strategy = config.contributor_selection
    if strategy is ContributorSelection.MANUAL:
        selected = merge_contributors(config.manual_contributors, [])
    elif history is None:
        logger.debug("No contributor history available for %s", path)
        selected = []
    else:
        selected = history.contributors_for(path, strategy, limit)
    logger.trace("Selected contributors for %s (%s): %s", path, strategy.value, selected)
    return selected[:limit]
