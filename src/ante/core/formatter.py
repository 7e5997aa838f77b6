# topmark:header:start
#
#   project      : Ante
#   file         : formatter.py
#   file_relpath : src/ante/core/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Column-aligned line formatting for copyright headers.

Callers declare *where* each fragment belongs (an absolute, 0-indexed
character offset) and `format_line` works out the spacing. When a fragment
runs past the next column's offset, exactly one space separates the two;
content is never truncated or overlapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ante.config.model import Config


class Column(NamedTuple):
    """A fragment of text and the column where it should start.

    Attributes:
        content (str): The text to place.
        position (int): The 0-indexed character offset where ``content`` starts.
    """

    content: str
    position: int


def format_line(columns: Iterable[Column]) -> str:
    """Lay out column fragments on a single line.

    Columns are sorted by position and written left to right, padding with
    spaces up to each target position. If the cursor already reached or
    passed a column's position, a single space is inserted instead.

    Args:
        columns (Iterable[Column]): The fragments to place, in any order.

    Returns:
        str: The formatted line; empty when ``columns`` is empty.
    """
    parts: list[str] = []
    cursor = 0
    for col in sorted(columns, key=lambda c: c.position):
        padding = col.position - cursor
        if padding > 0:
            parts.append(" " * padding)
            cursor += padding
        elif cursor > 0:
            # Overlap: keep at least one space between fragments
            parts.append(" ")
            cursor += 1
        parts.append(col.content)
        cursor += len(col.content)
    return "".join(parts)


def generate_separator(width: int, char: str = "-", prefix: str = "//") -> str:
    """Build a separator line of ``width`` characters.

    Args:
        width (int): Total line width, prefix included.
        char (str): Fill character.
        prefix (str): Comment prefix the line starts with.

    Returns:
        str: ``prefix`` followed by ``char`` repeated to fill ``width``, or just
            ``prefix`` when there is no room left.
    """
    fill = width - len(prefix)
    if fill <= 0:
        return prefix
    return prefix + char * fill


def pad_to_column(text: str, target_column: int) -> str:
    """Right-pad ``text`` with spaces up to ``target_column``.

    At least one space is always appended, so text already at or beyond the
    target is never glued to whatever follows.
    """
    if len(text) >= target_column:
        return text + " "
    return text + " " * (target_column - len(text))


def trim_to_width(line: str, width: int) -> str:
    """Truncate ``line`` to ``width`` characters if it is longer."""
    if len(line) <= width:
        return line
    return line[:width]


def adjust_to_width(line: str, width: int) -> str:
    """Pad or truncate ``line`` to exactly ``width`` characters."""
    if len(line) == width:
        return line
    if len(line) > width:
        return line[:width]
    return line + " " * (width - len(line))


def format_copyright_line(config: Config, year_part: str, name: str, email: str) -> str:
    """Format a copyright or contributor continuation line.

    Args:
        config (Config): The resolved configuration (prefix and columns).
        year_part (str): Year or year range (``"2025"`` or ``"2020-2025"``); empty for
            continuation lines, which then carry no ``Copyright (c)`` text.
        name (str): Contributor name, placed at ``config.name_column``.
        email (str): Contributor email, placed at ``config.email_column``.

    Returns:
        str: The formatted line.
    """
    prefix = config.comment_prefix
    line_start = f"{prefix} Copyright (c) {year_part}" if year_part else prefix
    return format_line(
        [
            Column(line_start, 0),
            Column(name, config.name_column),
            Column(email, config.email_column),
        ]
    )


def format_spdx_line(config: Config) -> str:
    """Format the SPDX license line.

    The license URL lands on ``config.license_url_column`` and the maintainer
    email on ``config.maintainer_column``. Empty values are left out so the
    line carries no trailing padding.
    """
    columns = [Column(f"{config.comment_prefix} SPDX-License-Identifier: {config.spdx_license}", 0)]
    if config.license_url:
        columns.append(Column(config.license_url, config.license_url_column))
    if config.maintainer_email:
        columns.append(Column(config.maintainer_email, config.maintainer_column))
    return format_line(columns)
