# topmark:header:start
#
#   project      : Ante
#   file         : fixer.py
#   file_relpath : src/ante/fixer.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Create or update the header of one file.

`HeaderFixer` decides what a file's header should look like and returns the
new content together with the action taken. It never writes; the ``fix``
and ``add`` commands do, so that dry runs and diffs share the same code path.

Contributors of a new header are the ones selected by the configured
strategy, followed by the current git user. Years run from the first commit
touching the file (or the current year for untracked files) to the current
year. With this rule a second run over a freshly fixed file is a no-op.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

from ante.config.logging import get_logger
from ante.core.contributors import contains_contributor, merge_contributors, select_contributors
from ante.core.header import (
    HeaderSyntax,
    format_year_range,
    generate_header,
    parse_header,
    replace_header,
    update_header,
)
from ante.files import join_preamble, read_source, split_preamble

if TYPE_CHECKING:
    from pathlib import Path

    from ante.config.logging import AnteLogger
    from ante.config.model import Config
    from ante.core.contributors import Contributor, ContributorHistory
    from ante.git.history import FileYearRange

logger: AnteLogger = get_logger(__name__)


class FixAction(str, Enum):
    """What happened to a file's header."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class FixResult:
    """Outcome for one file.

    Attributes:
        path (str): The file, as given by the caller.
        action (FixAction): What happened.
        details (str): Human-readable explanation; empty for unchanged files.
        original (str | None): ``\\n``-normalized content before the fix.
        updated (str | None): ``\\n``-normalized content after the fix.
        newline (str): Newline sequence to write the file back with.
    """

    path: str
    action: FixAction
    details: str = ""
    original: str | None = None
    updated: str | None = None
    newline: str = "\n"

    @property
    def modified(self) -> bool:
        return self.action in (FixAction.CREATED, FixAction.UPDATED)


@dataclass
class HeaderFixer:
    """Compute header fixes for files under one configuration.

    Attributes:
        config (Config): Resolved configuration.
        current_user (Contributor | None): The git user making the change.
        history (ContributorHistory | None): Contributor source for new headers.
        year_lookup (Callable[[Path], FileYearRange | None] | None): Commit years of a file.
        current_year (int): The year headers are brought up to.
    """

    config: Config
    current_user: Contributor | None = None
    history: ContributorHistory | None = None
    year_lookup: Callable[[Path], FileYearRange | None] | None = None
    current_year: int = field(default_factory=lambda: _dt.date.today().year)

    @property
    def syntax(self) -> HeaderSyntax:
        return HeaderSyntax.from_config(self.config)

    def contributors_for_new_header(
        self,
        path: Path,
        existing: tuple[Contributor, ...] = (),
    ) -> list[Contributor]:
        """Contributors credited by a newly created header for ``path``."""
        selected = select_contributors(path, self.config, self.history)
        extra = [self.current_user] if self.current_user is not None else []
        return merge_contributors(existing, [*selected, *extra])

    def years_for_new_header(self, path: Path) -> tuple[int, int]:
        """Return ``(year_start, year_end)`` for a newly created header."""
        years = self.year_lookup(path) if self.year_lookup is not None else None
        start = years.first_year if years is not None else self.current_year
        return min(start, self.current_year), self.current_year

    def new_header(self, path: Path, existing: tuple[Contributor, ...] = ()) -> str:
        """Generate a fresh header for ``path``."""
        year_start, year_end = self.years_for_new_header(path)
        return generate_header(
            self.config,
            self.contributors_for_new_header(path, existing),
            year_start,
            year_end,
        )

    def create_content(self, path: Path, content: str) -> str:
        """Return ``content`` with a freshly generated header.

        An existing header block is replaced and the contributors it lists
        are kept ahead of the newly selected ones.
        """
        preamble, body = split_preamble(content)
        parsed = parse_header(body, self.syntax)
        existing = parsed.contributors if parsed is not None else ()
        header = self.new_header(path, existing)
        return join_preamble(preamble, replace_header(body, header, parsed))

    def fix_content(self, path: Path, content: str) -> tuple[str, FixAction, str]:
        """Return ``(new_content, action, details)`` for ``\\n``-normalized ``content``.

        A leading byte order mark or interpreter directive stays in front of
        the header. A header block without a copyright line is rebuilt,
        keeping any contributors it lists.
        """
        preamble, body = split_preamble(content)
        parsed = parse_header(body, self.syntax)

        if parsed is None or parsed.year_start == 0:
            details = "Created new copyright header"
            return self.create_content(path, content), FixAction.CREATED, details

        updated_header = update_header(
            parsed,
            self.config,
            new_contributor=self.current_user,
            update_year=self.current_year,
        )
        if updated_header == parsed.raw:
            return content, FixAction.UNCHANGED, ""

        changes: list[str] = []
        if parsed.year_end < self.current_year:
            changes.append(
                f"Update year to {format_year_range(parsed.year_start, self.current_year)}"
            )
        if self.current_user is not None and not contains_contributor(
            parsed.contributors, self.current_user.email
        ):
            changes.append(f"Add contributor: {self.current_user.name}")
        if not changes:
            changes.append("Regenerate header layout")

        new_body = replace_header(body, updated_header, parsed)
        return join_preamble(preamble, new_body), FixAction.UPDATED, "; ".join(changes)

    def fix_file(self, path: Path, display_path: str | None = None) -> FixResult:
        """Read ``path`` and compute its fix. Read errors yield a SKIPPED result."""
        shown = display_path or str(path)
        try:
            source = read_source(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", path, e)
            return FixResult(shown, FixAction.SKIPPED, f"Error: {e}")

        new_content, action, details = self.fix_content(path, source.text)
        logger.debug("%s: %s %s", shown, action.value, details)
        return FixResult(
            path=shown,
            action=action,
            details=details,
            original=source.text,
            updated=new_content,
            newline=source.newline,
        )
