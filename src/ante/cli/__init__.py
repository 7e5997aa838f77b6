# topmark:header:start
#
#   project      : Ante
#   file         : __init__.py
#   file_relpath : src/ante/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Click command line interface for Ante."""

from __future__ import annotations
