# topmark:header:start
#
#   project      : Ante
#   file         : __init__.py
#   file_relpath : src/ante/git/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Git integration for Ante.

- ``history``: contributors and commit years from ``git log``, the current
  git user, and staging helpers.
- ``hooks``: pre-commit hook installation through ``core.hooksPath``.
"""

from __future__ import annotations
