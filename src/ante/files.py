# topmark:header:start
#
#   project      : Ante
#   file         : files.py
#   file_relpath : src/ante/files.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""File discovery and text I/O around the header engine.

The header engine only sees ``\\n``-separated text without a byte order mark
or interpreter directive. This module takes care of the rest: walking the
tree with include/exclude globs, detecting and restoring the newline style,
and slicing off the preamble that must stay ahead of the header.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ante.config.logging import get_logger
from ante.constants import ALWAYS_SKIPPED_DIRS
from ante.core.glob import filter_paths, matches_any_glob

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ante.config.logging import AnteLogger

logger: AnteLogger = get_logger(__name__)

BOM = "\ufeff"


def _to_posix_relpath(path: Path, base: Path) -> str:
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return Path(os.path.relpath(path, start=base)).as_posix()


def discover_files(
    paths: Iterable[str | Path],
    include: Sequence[str],
    exclude: Sequence[str],
    *,
    base: Path | None = None,
) -> list[str]:
    """Expand files and directories into the list of files to process.

    Directories are walked recursively without following symlinks. ``.git``
    and similar directories are never entered, and a directory is pruned
    when its path with a trailing ``/`` matches an exclude pattern. The
    collected paths are then filtered with `filter_paths`.

    Args:
        paths (Iterable[str | Path]): Files or directories, relative to ``base`` or absolute.
            An empty iterable means ``base`` itself.
        include (Sequence[str]): Include globs.
        exclude (Sequence[str]): Exclude globs.
        base (Path | None): Directory paths are reported relative to; the CWD when None.

    Returns:
        list[str]: Sorted, de-duplicated POSIX paths relative to ``base``.
    """
    root = (base or Path.cwd()).resolve()
    candidates: set[str] = set()

    for entry in list(paths) or ["."]:
        p = Path(entry)
        if not p.is_absolute():
            p = root / p
        if p.is_file():
            candidates.add(_to_posix_relpath(p.resolve(), root))
            continue
        if not p.is_dir():
            logger.warning("Path not found: %s", entry)
            continue
        for dirpath, dirnames, filenames in os.walk(p):
            current = Path(dirpath)
            kept: list[str] = []
            for d in dirnames:
                if d in ALWAYS_SKIPPED_DIRS:
                    continue
                rel_dir = _to_posix_relpath(current / d, root)
                if matches_any_glob(rel_dir + "/", exclude):
                    logger.trace("Pruning excluded directory %s", rel_dir)
                    continue
                kept.append(d)
            dirnames[:] = kept
            for name in filenames:
                candidates.add(_to_posix_relpath(current / name, root))

    selected = filter_paths(sorted(candidates), include, exclude)
    logger.debug("Discovered %d file(s), %d selected", len(candidates), len(selected))
    return selected


@dataclass(frozen=True)
class SourceText:
    """Text of a file normalized to ``\\n`` newlines.

    Attributes:
        text (str): File content with every newline converted to ``\\n``.
        newline (str): The file's newline sequence, used when writing back.
        mixed_newlines (bool): Whether the file used more than one newline sequence.
    """

    text: str
    newline: str = "\n"
    mixed_newlines: bool = False


def detect_newline(text: str) -> str:
    r"""Return the first newline sequence in ``text``: ``"\r\n"``, ``"\n"`` or ``"\r"``.

    Falls back to ``"\n"`` when the text has no newline.
    """
    for i, ch in enumerate(text):
        if ch == "\n":
            return "\n"
        if ch == "\r":
            return "\r\n" if text[i + 1 : i + 2] == "\n" else "\r"
    return "\n"


def read_source(path: Path) -> SourceText:
    """Read a UTF-8 file and normalize its newlines.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, encoding="utf-8", newline="") as f:
        raw = f.read()
    newline = detect_newline(raw)
    crlf = raw.count("\r\n")
    lone_cr = raw.count("\r") - crlf
    lone_lf = raw.count("\n") - crlf
    mixed = sum(1 for n in (crlf, lone_cr, lone_lf) if n) > 1
    if mixed:
        logger.debug("%s mixes newline styles; writing back with %r", path, newline)
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    return SourceText(text=text, newline=newline, mixed_newlines=mixed)


def write_source(path: Path, text: str, newline: str = "\n") -> None:
    """Write ``\\n``-separated ``text`` to ``path`` using ``newline``.

    Raises:
        OSError: If the file cannot be written.
    """
    if newline != "\n":
        text = text.replace("\n", newline)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    logger.debug("Wrote %d characters to %s", len(text), path)


def split_preamble(text: str) -> tuple[str, str]:
    """Split off a byte order mark and an interpreter directive line.

    Args:
        text (str): ``\\n``-normalized file content.

    Returns:
        tuple[str, str]: ``(preamble, body)`` with ``preamble + body == text``. The
            preamble keeps the directive's trailing newline.
    """
    preamble = ""
    body = text
    if body.startswith(BOM):
        preamble, body = BOM, body[len(BOM) :]
    if body.startswith("#!"):
        end = body.find("\n")
        cut = len(body) if end == -1 else end + 1
        preamble, body = preamble + body[:cut], body[cut:]
    return preamble, body


def join_preamble(preamble: str, body: str) -> str:
    """Reassemble content split by `split_preamble`.

    A directive without a trailing newline (a file holding only ``#!...``)
    gets one so the header starts on its own line.
    """
    if preamble not in ("", BOM) and not preamble.endswith("\n"):
        preamble += "\n"
    return preamble + body
