# topmark:header:start
#
#   project      : Ante
#   file         : header.py
#   file_relpath : src/ante/core/header.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Copyright header parsing, generation, update and validation.

A header is a comment block at the very top of a file:

    //--------------------------------------------------------------------
    // Copyright (c) 2020-2025 Jane Doe                jane@example.com
    //                         John Roe                john@example.com
    // SPDX-License-Identifier: MIT   https://opensource.org/licenses/MIT
    //--------------------------------------------------------------------

Parsing works in two steps. Each line is first classified on its own by
`classify_line` into a small closed set of `LineKind` values, then the
classified lines between the opening and closing separators are folded into
a `ParsedHeader`. Interior lines that match nothing are skipped.

Everything here is pure: strings and records in, strings and records out.
"""

from __future__ import annotations

import datetime as _dt
import functools
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from ante.config.logging import get_logger
from ante.core.contributors import Contributor, contains_contributor
from ante.core.formatter import format_copyright_line, format_spdx_line, generate_separator

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ante.config.logging import AnteLogger
    from ante.config.model import Config

logger: AnteLogger = get_logger(__name__)

DEFAULT_COMMENT_PREFIX = "//"

# Minimum indentation (after the prefix) of a contributor continuation line
DEFAULT_CONTINUATION_INDENT = 10


class LineKind(Enum):
    """Kinds of lines the header classifier recognizes."""

    SEPARATOR = "separator"
    COPYRIGHT = "copyright"
    CONTINUATION = "continuation"
    SPDX = "spdx"
    OTHER = "other"


@dataclass(frozen=True)
class ClassifiedLine:
    """A single header line after classification.

    Only the fields relevant to ``kind`` are populated.

    Attributes:
        kind (LineKind): What the line is.
        year_start (int | None): First year on a COPYRIGHT line.
        year_end (int | None): Second year on a COPYRIGHT line, or the first year again.
        contributor (Contributor | None): The contributor on a COPYRIGHT or CONTINUATION line.
        spdx_license (str | None): License id on an SPDX line.
        license_url (str | None): License URL on an SPDX line, if present.
        maintainer_email (str | None): Maintainer email on an SPDX line, if present.
    """

    kind: LineKind
    year_start: int | None = None
    year_end: int | None = None
    contributor: Contributor | None = None
    spdx_license: str | None = None
    license_url: str | None = None
    maintainer_email: str | None = None


class _Matchers(NamedTuple):
    separator: re.Pattern[str]
    copyright: re.Pattern[str]
    spdx: re.Pattern[str]
    continuation: re.Pattern[str]


@functools.lru_cache(maxsize=32)
def _compile_matchers(prefix: str, continuation_indent: int) -> _Matchers:
    p = re.escape(prefix)
    return _Matchers(
        separator=re.compile(rf"^{p}[-=*]+$"),
        copyright=re.compile(
            rf"^{p}\s*Copyright\s*\(c\)\s*(\d{{4}})(?:-(\d{{4}}))?\s+(.+?)\s{{2,}}(\S+@\S+)",
            re.IGNORECASE,
        ),
        spdx=re.compile(
            rf"^{p}\s*SPDX-License-Identifier:\s*(\S+)(?:\s+(https?://\S+))?\s*(\S+@\S+)?",
            re.IGNORECASE,
        ),
        continuation=re.compile(rf"^{p}\s{{{continuation_indent},}}(.+?)\s{{2,}}(\S+@\S+)"),
    )


@dataclass(frozen=True)
class HeaderSyntax:
    """Recognition parameters for one header dialect.

    Attributes:
        comment_prefix (str): Line comment token every header line starts with.
        continuation_indent (int): Minimum whitespace run after the prefix for a line to
            count as a contributor continuation line.
    """

    comment_prefix: str = DEFAULT_COMMENT_PREFIX
    continuation_indent: int = DEFAULT_CONTINUATION_INDENT

    @classmethod
    def from_config(cls, config: Config) -> HeaderSyntax:
        """Derive the syntax that recognizes headers generated with ``config``.

        The continuation threshold follows ``name_column`` so that a narrow name
        column still round-trips. It is capped at the default and never drops
        below one space.
        """
        prefix = config.comment_prefix
        indent = max(1, min(DEFAULT_CONTINUATION_INDENT, config.name_column - len(prefix)))
        return cls(comment_prefix=prefix, continuation_indent=indent)

    @property
    def matchers(self) -> _Matchers:
        return _compile_matchers(self.comment_prefix, self.continuation_indent)


DEFAULT_SYNTAX = HeaderSyntax()


def classify_line(line: str, syntax: HeaderSyntax = DEFAULT_SYNTAX) -> ClassifiedLine:
    """Classify a single line of a header block.

    Matchers are tried in this order: separator, copyright, SPDX,
    continuation. The first one that matches decides the kind.

    Args:
        line (str): The line, without its newline. A trailing ``\\r`` is ignored.
        syntax (HeaderSyntax): Recognition parameters.

    Returns:
        ClassifiedLine: The classification and its captured fields.
    """
    line = line.rstrip("\r")
    m = syntax.matchers

    if m.separator.match(line):
        return ClassifiedLine(LineKind.SEPARATOR)

    match = m.copyright.match(line)
    if match:
        year_start = int(match.group(1))
        year_end = int(match.group(2)) if match.group(2) else year_start
        return ClassifiedLine(
            LineKind.COPYRIGHT,
            year_start=year_start,
            year_end=year_end,
            contributor=Contributor(name=match.group(3).strip(), email=match.group(4)),
        )

    match = m.spdx.match(line)
    if match:
        return ClassifiedLine(
            LineKind.SPDX,
            spdx_license=match.group(1),
            license_url=match.group(2),
            maintainer_email=match.group(3),
        )

    match = m.continuation.match(line)
    if match:
        return ClassifiedLine(
            LineKind.CONTINUATION,
            contributor=Contributor(name=match.group(1).strip(), email=match.group(2)),
        )

    return ClassifiedLine(LineKind.OTHER)


@dataclass(frozen=True)
class ParsedHeader:
    """Structured view of a file's header block.

    Attributes:
        raw (str): The exact text from the opening through the closing separator.
        start_line (int): 1-indexed line of the opening separator (always 1).
        end_line (int): 1-indexed line of the closing separator, which is also the
            0-indexed position of the first line after the header.
        year_start (int): First copyright year, 0 when no copyright line was found.
        year_end (int): Last copyright year, equal to ``year_start`` for a single year.
        contributors (tuple[Contributor, ...]): Credited contributors, in header order.
        spdx_license (str | None): License id, None if there is no SPDX line.
        license_url (str | None): License URL, None if absent.
        maintainer_email (str | None): Maintainer email, None if absent.
    """

    raw: str
    start_line: int
    end_line: int
    year_start: int = 0
    year_end: int = 0
    contributors: tuple[Contributor, ...] = field(default_factory=tuple)
    spdx_license: str | None = None
    license_url: str | None = None
    maintainer_email: str | None = None


@dataclass(frozen=True)
class HeaderValidation:
    """Outcome of `validate_header`.

    Attributes:
        valid (bool): True when no issue was found.
        issues (tuple[str, ...]): Human-readable problems, in check order.
    """

    valid: bool
    issues: tuple[str, ...] = ()


class YearRange(NamedTuple):
    """Copyright years of a header."""

    year_start: int
    year_end: int


def parse_header(content: str, syntax: HeaderSyntax | None = None) -> ParsedHeader | None:
    """Parse the header block at the top of ``content``.

    Args:
        content (str): Full file content.
        syntax (HeaderSyntax | None): Recognition parameters; the default ``//`` syntax when
            None.

    Returns:
        ParsedHeader | None: The parsed header, or None if the content does not start
            with a separator line or the block is never closed.
    """
    if not content:
        return None
    syntax = syntax or DEFAULT_SYNTAX
    lines = content.split("\n")

    if classify_line(lines[0], syntax).kind is not LineKind.SEPARATOR:
        return None

    year_start = 0
    year_end = 0
    contributors: list[Contributor] = []
    spdx_license: str | None = None
    license_url: str | None = None
    maintainer_email: str | None = None
    end_line = -1

    for index in range(1, len(lines)):
        classified = classify_line(lines[index], syntax)
        kind = classified.kind
        if kind is LineKind.SEPARATOR:
            end_line = index + 1
            break
        if kind is LineKind.COPYRIGHT:
            if year_start == 0:
                year_start = classified.year_start or 0
                year_end = classified.year_end or 0
            if classified.contributor is not None:
                contributors.append(classified.contributor)
        elif kind is LineKind.CONTINUATION:
            if classified.contributor is not None:
                contributors.append(classified.contributor)
        elif kind is LineKind.SPDX:
            spdx_license = classified.spdx_license
            license_url = classified.license_url
            maintainer_email = classified.maintainer_email
        else:
            logger.trace("Skipping unrecognized header line %d: %r", index + 1, lines[index])

    if end_line == -1:
        logger.debug("Header opened on line 1 but never closed")
        return None

    return ParsedHeader(
        raw="\n".join(lines[:end_line]),
        start_line=1,
        end_line=end_line,
        year_start=year_start,
        year_end=year_end,
        contributors=tuple(contributors),
        spdx_license=spdx_license,
        license_url=license_url,
        maintainer_email=maintainer_email,
    )


def format_year_range(year_start: int, year_end: int | None = None) -> str:
    """Return ``"2025"`` for a single year or ``"2020-2025"`` for a range."""
    if year_end is None or year_end == year_start:
        return str(year_start)
    return f"{year_start}-{year_end}"


def generate_header(
    config: Config,
    contributors: Sequence[Contributor],
    year_start: int,
    year_end: int | None = None,
) -> str:
    """Generate a header block.

    Args:
        config (Config): Resolved configuration.
        contributors (Sequence[Contributor]): Contributors to credit; truncated to
            ``config.max_contributors``.
        year_start (int): First copyright year.
        year_end (int | None): Last copyright year; defaults to ``year_start``.

    Returns:
        str: The header lines joined by ``\\n``, without a trailing newline.
    """
    year_text = format_year_range(year_start, year_end)
    separator = generate_separator(config.width, config.separator_char, config.comment_prefix)

    lines: list[str] = [separator]
    for index, contributor in enumerate(contributors[: max(0, config.max_contributors)]):
        lines.append(
            format_copyright_line(
                config,
                year_text if index == 0 else "",
                contributor.name,
                contributor.email,
            )
        )
    lines.append(format_spdx_line(config))
    lines.append(separator)
    return "\n".join(lines)


def update_header(
    parsed: ParsedHeader,
    config: Config,
    *,
    new_contributor: Contributor | None = None,
    update_year: int | None = None,
) -> str:
    """Regenerate a parsed header with a raised end year and/or a new contributor.

    The end year only moves forward. The new contributor is appended unless a
    contributor with the same email is already credited.

    Args:
        parsed (ParsedHeader): The existing header.
        config (Config): Resolved configuration.
        new_contributor (Contributor | None): Contributor to add.
        update_year (int | None): Candidate end year.

    Returns:
        str: The regenerated header text.
    """
    year_end = parsed.year_end
    if update_year is not None and update_year > year_end:
        year_end = update_year

    contributors = list(parsed.contributors)
    if new_contributor is not None and not contains_contributor(contributors, new_contributor.email):
        contributors.append(new_contributor)

    return generate_header(config, contributors, parsed.year_start, year_end)


def has_valid_header(content: str, syntax: HeaderSyntax | None = None) -> bool:
    """Return True if ``content`` has a header crediting at least one contributor."""
    parsed = parse_header(content, syntax)
    return parsed is not None and len(parsed.contributors) > 0


def validate_header(
    content: str,
    config: Config,
    *,
    current_year: int | None = None,
) -> HeaderValidation:
    """Validate the header of ``content`` against ``config``.

    All checks run once a header is found; only a missing header stops early.

    Args:
        content (str): Full file content.
        config (Config): Resolved configuration.
        current_year (int | None): Reference year for "in the future" checks; the
            current calendar year when None.

    Returns:
        HeaderValidation: The report.
    """
    parsed = parse_header(content, HeaderSyntax.from_config(config))
    if parsed is None:
        return HeaderValidation(valid=False, issues=("No valid header found",))

    if current_year is None:
        current_year = _dt.date.today().year

    issues: list[str] = []
    if parsed.year_start > current_year:
        issues.append(f"Year {parsed.year_start} is in the future")
    if parsed.year_end > current_year:
        issues.append(f"End year {parsed.year_end} is in the future")
    if parsed.year_end < parsed.year_start:
        issues.append(f"End year {parsed.year_end} is before start year {parsed.year_start}")
    if config.spdx_license and parsed.spdx_license != config.spdx_license:
        issues.append(
            f"SPDX license '{parsed.spdx_license}' does not match config '{config.spdx_license}'"
        )
    if not parsed.contributors:
        issues.append("No contributors found in header")

    return HeaderValidation(valid=not issues, issues=tuple(issues))


def replace_header(
    content: str,
    new_header: str,
    existing_header: ParsedHeader | None = None,
) -> str:
    """Put ``new_header`` at the top of ``content``.

    With ``existing_header``, its lines are replaced and exactly one blank line
    separates the new header from the rest. Without it, leading whitespace is
    stripped and the header is prepended followed by one blank line.

    Leading constructs such as an interpreter directive are not preserved here;
    callers slice them off first (see `ante.files.split_preamble`).
    """
    if existing_header is not None:
        after = content.split("\n")[existing_header.end_line :]
        gap = "" if after and after[0].strip() == "" else "\n"
        return new_header + "\n" + gap + "\n".join(after)

    return new_header + "\n\n" + content.lstrip()


def has_contributor(content: str, email: str, syntax: HeaderSyntax | None = None) -> bool:
    """Return True if the header of ``content`` credits ``email`` (any case)."""
    parsed = parse_header(content, syntax)
    if parsed is None:
        return False
    return contains_contributor(parsed.contributors, email)


def get_year_range(content: str, syntax: HeaderSyntax | None = None) -> YearRange | None:
    """Return the copyright years of the header of ``content``.

    None when there is no header, or when the header has no copyright line.
    """
    parsed = parse_header(content, syntax)
    if parsed is None or parsed.year_start == 0:
        return None
    return YearRange(parsed.year_start, parsed.year_end)
