# topmark:header:start
#
#   project      : Ante
#   file         : __main__.py
#   file_relpath : src/ante/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Module entry point for running Ante via ``python -m ante``.

Equivalent to running the ``ante`` console script.
"""

from __future__ import annotations

from ante.cli.main import cli

if __name__ == "__main__":
    cli()
