# topmark:header:start
#
#   project      : Ante
#   file         : __init__.py
#   file_relpath : src/ante/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Configuration handling for Ante.

- ``model``: the frozen `Config` record and the `MutableConfig` builder with
  its merge and freeze logic.
- ``io``: TOML (`tomlkit`) and JSON loaders and tolerant value getters.
- ``sources``: upward discovery of config sources and `load_config`.
- ``logging``: the Ante logger class and colored log setup.

Submodules are imported explicitly; this package does not re-export them.
"""

from __future__ import annotations
