# topmark:header:start
#
#   project      : Ante
#   file         : history.py
#   file_relpath : src/ante/git/history.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Read contributor and date information from git.

Every lookup here is best effort: when git is missing, the directory is not
a repository, or the file has no history, the functions return ``None`` or an
empty list and log at debug level. Only `run_git_checked` raises.
"""

from __future__ import annotations

import subprocess
from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

from ante.config.logging import get_logger
from ante.core.contributors import Contributor, ContributorSelection

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ante.config.logging import AnteLogger

logger: AnteLogger = get_logger(__name__)

# Field separator used in --format strings
_SEP = "\x1f"
# Marks commit lines in --numstat output
_COMMIT_MARK = "\x1e"


class GitError(RuntimeError):
    """A git command that had to succeed failed."""


class FileYearRange(NamedTuple):
    """Years of the first and the latest commit touching a file."""

    first_year: int
    last_year: int


def run_git(args: Sequence[str], cwd: Path | str | None = None) -> str | None:
    """Run ``git`` with ``args`` and return its stdout.

    Args:
        args (Sequence[str]): Arguments after ``git``.
        cwd (Path | str | None): Working directory; the process CWD when None.

    Returns:
        str | None: Standard output with trailing whitespace stripped, or None when
            git is not installed or exits with a non-zero status.
    """
    cmd = ["git", *args]
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError:
        logger.debug("git executable not found")
        return None
    except OSError as e:
        logger.debug("Cannot run %s: %s", " ".join(cmd), e)
        return None
    if result.returncode != 0:
        logger.debug(
            "%s exited with %d: %s", " ".join(cmd), result.returncode, result.stderr.strip()
        )
        return None
    return result.stdout.rstrip()


def run_git_checked(args: Sequence[str], cwd: Path | str | None = None) -> str:
    """Like `run_git`, but raise `GitError` on failure."""
    out = run_git(args, cwd)
    if out is None:
        raise GitError(f"git {' '.join(args)} failed")
    return out


def get_git_config(key: str, cwd: Path | str | None = None) -> str | None:
    """Return ``git config <key>``, or None when unset or unavailable."""
    value = run_git(["config", "--get", key], cwd)
    return value.strip() if value else None


def get_current_git_user(cwd: Path | str | None = None) -> Contributor | None:
    """Return the configured git user, or None unless both name and email are set."""
    name = get_git_config("user.name", cwd)
    email = get_git_config("user.email", cwd)
    if not name or not email:
        logger.debug("git user.name/user.email not configured")
        return None
    return Contributor(name=name, email=email)


def _split_path(path: Path | str) -> tuple[Path, str]:
    p = Path(path)
    return p.parent, p.name


def _parse_authors(output: str) -> list[Contributor]:
    authors: list[Contributor] = []
    for line in output.split("\n"):
        if _SEP not in line:
            continue
        name, email = line.split(_SEP, 1)
        if email:
            authors.append(Contributor(name=name.strip(), email=email.strip()))
    return authors


def rank_by_commits(authors: Iterable[Contributor]) -> list[Contributor]:
    """Rank authors (one entry per commit) by commit count.

    Ties keep first-seen order; the name shown is the first one seen for the
    email.
    """
    first_seen: dict[str, Contributor] = {}
    counts: Counter[str] = Counter()
    for author in authors:
        first_seen.setdefault(author.key, author)
        counts[author.key] += 1
    order = list(first_seen)
    return [first_seen[k] for k in sorted(order, key=lambda k: -counts[k])]


def rank_by_recency(authors: Iterable[Contributor]) -> list[Contributor]:
    """Unique authors in input order (newest commit first)."""
    first_seen: dict[str, Contributor] = {}
    for author in authors:
        first_seen.setdefault(author.key, author)
    return list(first_seen.values())


def rank_by_lines(numstat_output: str) -> list[Contributor]:
    """Rank authors by lines added plus deleted.

    Args:
        numstat_output (str): ``git log --numstat`` output where each commit
            line is the commit marker followed by ``name<US>email``.

    Returns:
        list[Contributor]: Authors with the largest line totals first; ties
            keep first-seen order.
    """
    first_seen: dict[str, Contributor] = {}
    totals: Counter[str] = Counter()
    current: str | None = None
    # str.splitlines() would also break on the commit marker
    for line in numstat_output.split("\n"):
        if line.startswith(_COMMIT_MARK):
            authors = _parse_authors(line[len(_COMMIT_MARK) :])
            if authors:
                author = authors[0]
                first_seen.setdefault(author.key, author)
                current = author.key
                totals[current] += 0
            else:
                current = None
            continue
        if current is None or not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) < 3:
            continue
        added, deleted = parts[0], parts[1]
        # Binary files report "-" for both counts
        totals[current] += (int(added) if added.isdigit() else 0) + (
            int(deleted) if deleted.isdigit() else 0
        )
    order = list(first_seen)
    return [first_seen[k] for k in sorted(order, key=lambda k: -totals[k])]


def get_contributors_from_history(
    path: Path | str,
    strategy: ContributorSelection,
    max_contributors: int,
) -> list[Contributor]:
    """Return up to ``max_contributors`` authors of ``path`` ranked by ``strategy``.

    Args:
        path (Path | str): The file to inspect.
        strategy (ContributorSelection): ``commits``, ``lines`` or ``recent``.
            ``manual`` does not consult history and yields an empty list.
        max_contributors (int): Maximum number of contributors returned.

    Returns:
        list[Contributor]: Ranked contributors, empty when there is no history.
    """
    if max_contributors <= 0 or strategy is ContributorSelection.MANUAL:
        return []
    cwd, name = _split_path(path)

    if strategy is ContributorSelection.LINES:
        out = run_git(
            ["log", "--follow", "--numstat", f"--format={_COMMIT_MARK}%an{_SEP}%ae", "--", name],
            cwd,
        )
        ranked = rank_by_lines(out) if out else []
    else:
        out = run_git(["log", "--follow", f"--format=%an{_SEP}%ae", "--", name], cwd)
        authors = _parse_authors(out) if out else []
        if strategy is ContributorSelection.RECENT:
            ranked = rank_by_recency(authors)
        else:
            ranked = rank_by_commits(authors)

    logger.debug("History contributors for %s (%s): %s", path, strategy.value, ranked)
    return ranked[:max_contributors]


def get_file_year_range(path: Path | str) -> FileYearRange | None:
    """Return the author years of the first and the latest commit of ``path``."""
    cwd, name = _split_path(path)
    out = run_git(["log", "--follow", "--format=%ad", "--date=format:%Y", "--", name], cwd)
    if not out:
        return None
    years = [int(line) for line in out.split() if line.isdigit()]
    if not years:
        return None
    return FileYearRange(first_year=min(years), last_year=max(years))


class GitHistory:
    """`ContributorHistory` backed by ``git log``."""

    def contributors_for(
        self,
        path: Path,
        strategy: ContributorSelection,
        limit: int,
    ) -> list[Contributor]:
        return get_contributors_from_history(path, strategy, limit)


# --- Staging area ---


def get_staged_files(diff_filter: str = "ACM", cwd: Path | str | None = None) -> list[str]:
    """Return staged paths (relative to the repository root) matching ``diff_filter``."""
    out = run_git(["diff", "--cached", "--name-only", f"--diff-filter={diff_filter}"], cwd)
    if not out:
        return []
    return [line for line in out.splitlines() if line]


def get_repo_root(cwd: Path | str | None = None) -> Path | None:
    """Return the top-level directory of the enclosing repository."""
    out = run_git(["rev-parse", "--show-toplevel"], cwd)
    return Path(out) if out else None


def is_tracked_by_git(path: Path | str) -> bool:
    """Return True if ``path`` is known to git."""
    cwd, name = _split_path(path)
    return run_git(["ls-files", "--error-unmatch", "--", name], cwd) is not None


def stage_file(path: Path | str) -> bool:
    """Run ``git add`` on ``path``; return True on success."""
    cwd, name = _split_path(path)
    return run_git(["add", "--", name], cwd) is not None
