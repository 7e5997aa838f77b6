# topmark:header:start
#
#   project      : Ante
#   file         : __init__.py
#   file_relpath : src/ante/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Ante subcommands: ``check``, ``fix``, ``add``, ``init`` and ``version``."""

from __future__ import annotations
