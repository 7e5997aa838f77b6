# topmark:header:start
#
#   project      : Ante
#   file         : sources.py
#   file_relpath : src/ante/config/sources.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Discover configuration sources and resolve the effective `Config`.

Discovery walks upward from a start directory and stops at the first
directory holding a config source. Within one directory the candidates are
probed in this order, and the first one carrying an Ante section wins:

1. ``ante.toml`` (the whole document is the Ante table)
2. ``pyproject.toml`` (the ``[tool.ante]`` table)
3. ``deno.json`` then ``package.json`` (the ``"ante"`` object, camelCase keys)

Layering for `load_config`: built-in defaults, then the discovered (or
explicit) source, then caller overrides. Two gaps are filled afterwards
from the environment: the SPDX id from the project's own license
declaration, and the maintainer email from ``git config user.email``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ante.config.io import ConfigError, ConfigTable, get_table_value, load_json_dict, load_toml_dict
from ante.config.logging import get_logger
from ante.config.model import MutableConfig
from ante.constants import ANTE_TOML_NAME, CONFIG_SECTION, JSON_MANIFEST_NAMES, PYPROJECT_TOML_NAME
from ante.git.history import get_git_config

if TYPE_CHECKING:
    from ante.config.logging import AnteLogger
    from ante.config.model import Config

logger: AnteLogger = get_logger(__name__)


@dataclass(frozen=True)
class ConfigSource:
    """An Ante configuration table and where it came from.

    Attributes:
        path (Path): The file holding the table.
        table (ConfigTable): The Ante table itself.
        camel_case (bool): Whether keys are camelCase (JSON manifests).
        project_license (str | None): License declared by the same manifest, if any.
    """

    path: Path
    table: ConfigTable = field(default_factory=lambda: {})
    camel_case: bool = False
    project_license: str | None = None


def _pyproject_license(data: ConfigTable) -> str | None:
    # PEP 639 uses a plain string; older metadata uses {text = "..."}
    value: Any = get_table_value(data, "project").get("license")
    if isinstance(value, str) and value:
        return value
    if isinstance(value, dict):
        text = value.get("text")
        if isinstance(text, str) and text:
            return text
    return None


def _json_license(data: ConfigTable) -> str | None:
    value: Any = data.get("license")
    return value if isinstance(value, str) and value else None


def read_config_source(path: Path, *, required: bool = True) -> ConfigSource | None:
    """Read the Ante table from one file.

    Args:
        path (Path): ``ante.toml``-style TOML, ``pyproject.toml``, or a JSON manifest.
        required (bool): When True, a missing file raises instead of returning None.
            A file without an Ante section yields an empty table when required,
            and None otherwise.

    Returns:
        ConfigSource | None: The source, or None when not required and absent.

    Raises:
        ConfigError: If a required file is missing, or if the file cannot be parsed.
    """
    if not path.is_file():
        if required:
            raise ConfigError(f"Config file not found: {path}", path)
        return None

    if path.suffix == ".json":
        data = load_json_dict(path)
        section: Any = data.get(CONFIG_SECTION)
        if not isinstance(section, dict):
            if not required:
                return None
            section = {}
        return ConfigSource(path, section, camel_case=True, project_license=_json_license(data))

    data = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        tool = get_table_value(data, "tool")
        if CONFIG_SECTION not in tool and not required:
            return None
        return ConfigSource(
            path,
            get_table_value(tool, CONFIG_SECTION),
            project_license=_pyproject_license(data),
        )
    return ConfigSource(path, data)


def discover_config_source(start: Path) -> ConfigSource | None:
    """Return the nearest config source at or above ``start``."""
    current = start.resolve()
    if current.is_file():
        current = current.parent
    while True:
        for name in (ANTE_TOML_NAME, PYPROJECT_TOML_NAME, *JSON_MANIFEST_NAMES):
            source = read_config_source(current / name, required=False)
            if source is not None:
                logger.debug("Discovered config source: %s", source.path)
                return source
        if current.parent == current:
            logger.debug("No config source found above %s", start)
            return None
        current = current.parent


def detect_project_license(start: Path) -> str | None:
    """Return the license declared by the nearest project manifest.

    ``[project].license`` in ``pyproject.toml`` and ``"license"`` in JSON
    manifests are consulted. Unparseable manifests are skipped.
    """
    current = start.resolve()
    if current.is_file():
        current = current.parent
    while True:
        for name in (PYPROJECT_TOML_NAME, *JSON_MANIFEST_NAMES):
            candidate = current / name
            if not candidate.is_file():
                continue
            try:
                if candidate.suffix == ".json":
                    found = _json_license(load_json_dict(candidate))
                else:
                    found = _pyproject_license(load_toml_dict(candidate))
            except ConfigError as e:
                logger.debug("Skipping %s while detecting license: %s", candidate, e)
                continue
            if found:
                logger.debug("Project license %s from %s", found, candidate)
                return found
        if current.parent == current:
            return None
        current = current.parent


def load_config(
    path: Path | None = None,
    *,
    start: Path | None = None,
    overrides: MutableConfig | None = None,
    use_git: bool = True,
) -> Config:
    """Resolve the effective configuration.

    Args:
        path (Path | None): Explicit config file; discovery is skipped when given.
        start (Path | None): Where discovery starts; the current directory when None.
        overrides (MutableConfig | None): Highest-precedence layer (CLI options).
        use_git (bool): Whether ``git config user.email`` may fill ``maintainer_email``.

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigError: If the explicit file is missing or any source is malformed.
    """
    base = (start or Path.cwd()).resolve()
    source = read_config_source(path) if path is not None else discover_config_source(base)

    draft = MutableConfig.from_defaults()
    if source is not None:
        draft = draft.merge_with(
            MutableConfig.from_mapping(source.table, source.path, camel_case=source.camel_case)
        )
        base = source.path.parent
    if overrides is not None:
        draft = draft.merge_with(overrides)

    if not draft.spdx_license:
        detected = source.project_license if source is not None else None
        detected = detected or detect_project_license(base)
        if detected:
            draft.spdx_license = detected

    if not draft.maintainer_email and use_git:
        email = get_git_config("user.email", base)
        if email:
            draft.maintainer_email = email

    return draft.freeze()
