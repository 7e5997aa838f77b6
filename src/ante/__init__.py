# topmark:header:start
#
#   project      : Ante
#   file         : __init__.py
#   file_relpath : src/ante/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Ante package.

Ante keeps copyright and license headers consistent across a source tree. It
parses existing headers, generates new ones from configuration, credits
contributors from git history, and rewrites files through a small CLI.
"""

from __future__ import annotations
