# topmark:header:start
#
#   project      : Ante
#   file         : io.py
#   file_relpath : src/ante/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Load configuration sources and extract typed values from them.

Sources are parsed into plain ``dict`` tables: TOML with `tomlkit`, JSON
manifests (``deno.json`` / ``package.json``) with `json`. Parse errors raise
`ConfigError`; a missing file is not an error for the callers that probe for
candidates.

The getters are tolerant: a value of the wrong type yields ``None`` and a
warning diagnostic, never an exception.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from ante.config.logging import get_logger
from ante.core.diagnostics import Diagnostic, DiagnosticLevel

if TYPE_CHECKING:
    from pathlib import Path

    from ante.config.logging import AnteLogger

logger: AnteLogger = get_logger(__name__)

# A parsed TOML table or JSON object
ConfigTable = dict[str, Any]


class ConfigError(Exception):
    """A configuration source exists but cannot be read or parsed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


# --- Source loaders ---


def load_toml_dict(path: Path) -> ConfigTable:
    """Load and parse a TOML file.

    Args:
        path (Path): The TOML document to read.

    Returns:
        ConfigTable: The parsed document as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}", path) from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", path) from e
    data_any: Any = doc.unwrap()
    return cast("ConfigTable", data_any) if isinstance(data_any, dict) else {}


def load_json_dict(path: Path) -> ConfigTable:
    """Load and parse a JSON manifest.

    Raises:
        ConfigError: If the file cannot be read or is not valid JSON.
    """
    try:
        data_any: Any = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}", path) from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}", path) from e
    if not isinstance(data_any, dict):
        logger.debug("Top-level JSON value in %s is not an object", path)
        return {}
    return cast("ConfigTable", data_any)


def get_table_value(table: ConfigTable, *keys: str) -> ConfigTable:
    """Follow ``keys`` through nested tables; return ``{}`` if any step is missing."""
    current: Any = table
    for key in keys:
        if not isinstance(current, dict):
            return {}
        current = cast("ConfigTable", current).get(key)
    return cast("ConfigTable", current) if isinstance(current, dict) else {}


def add_toml_section(path: Path, section_keys: str, values: ConfigTable) -> bool:
    """Add a table at a dotted path to a TOML file, preserving its formatting.

    The file is created when missing. Intermediate tables such as ``[tool]``
    are created as implicit super-tables so only ``[tool.ante]`` is written.

    Args:
        path (Path): TOML file to edit.
        section_keys (str): Dotted section path such as ``"tool.ante"``; empty
            means the document root.
        values (ConfigTable): Key/value pairs of the new table.

    Returns:
        bool: False if the section already exists (nothing is written).

    Raises:
        ConfigError: If the file cannot be read, parsed or written, or if a key
            along the path is not a table.
    """
    try:
        text = path.read_text(encoding="utf-8") if path.exists() else ""
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}", path) from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", path) from e

    keys = [k for k in section_keys.split(".") if k]
    if not keys:
        if doc.unwrap():
            return False
        for key, value in values.items():
            doc[key] = value
    else:
        current: Any = doc
        for key in keys[:-1]:
            if key not in current:
                current[key] = tomlkit.table(is_super_table=True)
            current = current[key]
            if not isinstance(current, dict):
                raise ConfigError(f"{path}: '{key}' is not a table", path)
        if keys[-1] in current:
            return False
        table = tomlkit.table()
        for key, value in values.items():
            table[key] = value
        current[keys[-1]] = table

    try:
        path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot write {path}: {e}", path) from e
    logger.debug("Wrote [%s] to %s", section_keys, path)
    return True


# --- Key normalization ---

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def camel_to_snake(key: str) -> str:
    """Convert ``nameColumn`` to ``name_column``; snake_case keys pass through."""
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def normalize_keys(table: ConfigTable) -> ConfigTable:
    """Return a shallow copy of ``table`` with camelCase keys in snake_case."""
    return {camel_to_snake(k): v for k, v in table.items()}


# --- Checked getters ---


def _warn(diagnostics: list[Diagnostic], message: str) -> None:
    logger.warning(message)
    diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))


def get_int_value_or_none(
    table: ConfigTable,
    key: str,
    diagnostics: list[Diagnostic],
) -> int | None:
    """Extract an integer. Booleans and other types are rejected with a warning."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    _warn(diagnostics, f"Expected an integer for '{key}', got {value!r}; ignoring")
    return None


def get_string_value_or_none(
    table: ConfigTable,
    key: str,
    diagnostics: list[Diagnostic],
) -> str | None:
    """Extract a string. Numbers are coerced with ``str()``; other types warn."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        logger.debug("Coercing %r to string for key %s", value, key)
        return str(value)
    _warn(diagnostics, f"Expected a string for '{key}', got {value!r}; ignoring")
    return None


def get_string_list_or_none(
    table: ConfigTable,
    key: str,
    diagnostics: list[Diagnostic],
) -> list[str] | None:
    """Extract a list of strings. Non-string items are dropped with a warning."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        _warn(diagnostics, f"Expected a list for '{key}', got {value!r}; ignoring")
        return None
    items: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            items.append(item)
        else:
            _warn(diagnostics, f"Ignoring non-string entry {item!r} in '{key}'")
    return items


def get_table_list_or_none(
    table: ConfigTable,
    key: str,
    diagnostics: list[Diagnostic],
) -> list[ConfigTable] | None:
    """Extract a list of tables (TOML array of tables or JSON array of objects)."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        _warn(diagnostics, f"Expected a list of tables for '{key}', got {value!r}; ignoring")
        return None
    tables: list[ConfigTable] = []
    for item in cast("list[Any]", value):
        if isinstance(item, dict):
            tables.append(cast("ConfigTable", item))
        else:
            _warn(diagnostics, f"Ignoring non-table entry {item!r} in '{key}'")
    return tables
