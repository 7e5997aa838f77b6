# topmark:header:start
#
#   project      : Ante
#   file         : glob.py
#   file_relpath : src/ante/core/glob.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Glob pattern matching for include/exclude filtering.

Patterns are compiled into anchored regular expressions, one character at a
time. Supported syntax:

- ``*`` matches any run of characters except the path separator ``/``.
- ``?`` matches exactly one character except ``/``.
- ``**`` (globstar) between separators, e.g. ``**/*.ts`` or ``src/**/x``,
  matches zero or more complete path segments. At the end of a pattern
  (``dist/**``) it matches everything below. Anywhere else it matches
  anything, separators included.
- Every other character matches itself; regex metacharacters are escaped.

Compilation never fails: each character has a defined rule, so a malformed
pattern simply matches nothing useful.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

# Characters that must be escaped to be matched literally
_REGEX_SPECIALS: Final[frozenset[str]] = frozenset("+^$.{}()|[]\\")

# Zero or more complete path segments (including their trailing "/")
_GLOBSTAR_SEGMENTS: Final[str] = r"(?:.*?/)?"
_ANYTHING: Final[str] = r".*"
_SEGMENT_CHARS: Final[str] = r"[^/]*"
_SEGMENT_CHAR: Final[str] = r"[^/]"


def _translate(pattern: str) -> str:
    """Translate a glob pattern into an (unanchored) regex source string."""
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "*" and i + 1 < n and pattern[i + 1] == "*":
            left_bounded = i == 0 or pattern[i - 1] == "/"
            after = pattern[i + 2] if i + 2 < n else None
            if left_bounded and after == "/":
                out.append(_GLOBSTAR_SEGMENTS)
                i += 3
            else:
                # "dist/**" at the end, or "**" embedded in a segment
                out.append(_ANYTHING)
                i += 2
        elif char == "*":
            out.append(_SEGMENT_CHARS)
            i += 1
        elif char == "?":
            out.append(_SEGMENT_CHAR)
            i += 1
        elif char in _REGEX_SPECIALS:
            out.append("\\" + char)
            i += 1
        else:
            out.append(re.escape(char))
            i += 1
    return "".join(out)


@functools.lru_cache(maxsize=512)
def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Convert a glob pattern to a compiled, fully anchored regular expression.

    Args:
        pattern (str): The glob pattern to convert.

    Returns:
        re.Pattern[str]: A pattern matching whole paths according to the glob. The
            empty pattern only matches the empty path.
    """
    return re.compile(f"^{_translate(pattern)}$", re.DOTALL)


def compile_glob(pattern: str) -> Callable[[str], bool]:
    """Compile a glob pattern into a path predicate.

    Args:
        pattern (str): The glob pattern.

    Returns:
        Callable[[str], bool]: Predicate returning True for paths that match the
            pattern in full.
    """
    regex = glob_to_regex(pattern)

    def _matches(path: str) -> bool:
        return regex.match(path) is not None

    return _matches


def matches_glob(path: str, pattern: str) -> bool:
    """Return True if ``path`` matches the glob ``pattern``.

    Args:
        path (str): The file path to test (POSIX separators).
        pattern (str): The glob pattern to match against.

    Returns:
        bool: True if the whole path matches the pattern.
    """
    return glob_to_regex(pattern).match(path) is not None


def matches_any_glob(path: str, patterns: Iterable[str]) -> bool:
    """Return True if any of ``patterns`` matches ``path``.

    An empty pattern list never matches.
    """
    return any(matches_glob(path, pattern) for pattern in patterns)


def filter_paths(
    paths: Iterable[str],
    include_patterns: Sequence[str],
    exclude_patterns: Sequence[str] = (),
) -> list[str]:
    """Filter paths by include and exclude globs.

    Exclusion is evaluated first: a path matching any exclude pattern is
    dropped regardless of the include patterns. Remaining paths are kept only
    when they match at least one include pattern.

    Args:
        paths (Iterable[str]): Candidate paths, order preserved.
        include_patterns (Sequence[str]): Patterns a path must match.
        exclude_patterns (Sequence[str]): Patterns that remove a path.

    Returns:
        list[str]: The paths that survived filtering.
    """
    return [
        path
        for path in paths
        if not matches_any_glob(path, exclude_patterns)
        and matches_any_glob(path, include_patterns)
    ]
