# topmark:header:start
#
#   project      : Ante
#   file         : __init__.py
#   file_relpath : src/ante/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Pure header engine for Ante.

Nothing in ``ante.core`` touches the filesystem or spawns processes: it works
on strings, configuration records and contributor lists only.

Included modules:

- ``glob``
  Glob to regex compiler with globstar support, used for include/exclude
  filtering.

- ``formatter``
  Column-aligned line layout and separator generation.

- ``header``
  Line classifier, header parsing, generation, update, validation and
  replacement.

- ``contributors``
  Contributor value type, merging and strategy-based selection.

- ``licenses``
  SPDX identifier to license URL lookup.

- ``diagnostics``
  Severity-tagged messages collected while resolving configuration.
"""

from __future__ import annotations
