# topmark:header:start
#
#   project      : Ante
#   file         : constants.py
#   file_relpath : src/ante/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Ante constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    ANTE_VERSION: str = get_version("ante")
except PackageNotFoundError:  # running from a source checkout without install
    ANTE_VERSION = "0.0.0"

# Name of the config section in pyproject.toml ([tool.ante]) and JSON manifests ("ante")
CONFIG_SECTION: str = "ante"

# Config sources probed per directory, in precedence order
ANTE_TOML_NAME: str = "ante.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
JSON_MANIFEST_NAMES: tuple[str, ...] = ("deno.json", "package.json")

# Git hook installation
HOOKS_DIR_NAME: str = ".githooks"
PRE_COMMIT_HOOK_NAME: str = "pre-commit"
HOOK_MARKER: str = "# ante:pre-commit"

# Directories never descended into during discovery
ALWAYS_SKIPPED_DIRS: frozenset[str] = frozenset({".git", ".hg", ".svn"})
