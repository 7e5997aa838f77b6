# topmark:header:start
#
#   project      : Ante
#   file         : model.py
#   file_relpath : src/ante/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Configuration model for Ante.

Two types cooperate here:

- `MutableConfig` is a builder. Every field is optional (``None`` means
  "not set by this layer"), so layers can be merged with last-wins
  semantics: defaults, then a discovered config source, then CLI overrides.
- `Config` is the frozen result. Every field holds a concrete value, which is
  what the header engine and the path matcher rely on.

`MutableConfig.freeze` resolves the remaining gaps (defaults, the license URL
derived from the SPDX id) and records diagnostics for suspect values instead
of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from ante.config.io import (
    ConfigTable,
    get_int_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_list_or_none,
    normalize_keys,
)
from ante.config.logging import get_logger
from ante.core.contributors import Contributor, ContributorSelection
from ante.core.diagnostics import Diagnostic, DiagnosticLevel
from ante.core.header import DEFAULT_CONTINUATION_INDENT
from ante.core.licenses import derive_license_url

if TYPE_CHECKING:
    from ante.config.logging import AnteLogger

logger: AnteLogger = get_logger(__name__)

# Characters the header parser accepts in separator lines
SEPARATOR_CHARS: Final[str] = "-=*"

DEFAULT_WIDTH: Final[int] = 100
DEFAULT_SEPARATOR_CHAR: Final[str] = "-"
DEFAULT_COMMENT_PREFIX: Final[str] = "//"
DEFAULT_NAME_COLUMN: Final[int] = 40
DEFAULT_EMAIL_COLUMN: Final[int] = 65
DEFAULT_LICENSE_URL_COLUMN: Final[int] = 40
DEFAULT_MAINTAINER_COLUMN: Final[int] = 75
DEFAULT_MAX_CONTRIBUTORS: Final[int] = 3
DEFAULT_CONTRIBUTOR_SELECTION: Final[ContributorSelection] = ContributorSelection.COMMITS
DEFAULT_INCLUDE: Final[tuple[str, ...]] = ("**/*.ts", "**/*.tsx", "**/*.js", "**/*.jsx")
DEFAULT_EXCLUDE: Final[tuple[str, ...]] = (
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/coverage/**",
)

_INT_KEYS: Final[tuple[str, ...]] = (
    "width",
    "name_column",
    "email_column",
    "license_url_column",
    "maintainer_column",
    "max_contributors",
)
_STR_KEYS: Final[tuple[str, ...]] = (
    "separator_char",
    "comment_prefix",
    "spdx_license",
    "license_url",
    "maintainer_email",
)
_LIST_KEYS: Final[tuple[str, ...]] = ("include", "exclude")
KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    (*_INT_KEYS, *_STR_KEYS, *_LIST_KEYS, "contributor_selection", "manual_contributors")
)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Resolved configuration; every field holds a concrete value.

    Attributes:
        width (int): Total header line width, comment prefix included.
        separator_char (str): Fill character for separator lines.
        comment_prefix (str): Line comment token starting every header line.
        name_column (int): 0-indexed column of contributor names.
        email_column (int): 0-indexed column of contributor emails.
        license_url_column (int): 0-indexed column of the license URL on the SPDX line.
        maintainer_column (int): 0-indexed column of the maintainer email on the SPDX line.
        spdx_license (str): SPDX license id; empty disables the license check.
        license_url (str): License URL; derived from ``spdx_license`` when not configured.
        maintainer_email (str): Maintainer email shown on the SPDX line.
        max_contributors (int): Maximum number of contributors credited in a header.
        contributor_selection (ContributorSelection): How contributors are picked.
        manual_contributors (tuple[Contributor, ...]): Contributors for the ``manual`` strategy.
        include (tuple[str, ...]): Glob patterns selecting files.
        exclude (tuple[str, ...]): Glob patterns removing files.
        config_files (tuple[Path | str, ...]): Sources that contributed to this config.
        diagnostics (tuple[Diagnostic, ...]): Problems found while resolving.
    """

    width: int
    separator_char: str
    comment_prefix: str
    name_column: int
    email_column: int
    license_url_column: int
    maintainer_column: int
    spdx_license: str
    license_url: str
    maintainer_email: str
    max_contributors: int
    contributor_selection: ContributorSelection
    manual_contributors: tuple[Contributor, ...]
    include: tuple[str, ...]
    exclude: tuple[str, ...]
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def to_toml_dict(self) -> ConfigTable:
        """Return the configurable fields as a TOML-serializable dict.

        Provenance (``config_files``, ``diagnostics``) is not exported, and an
        empty manual contributor list is left out.
        """
        data: ConfigTable = {
            "width": self.width,
            "separator_char": self.separator_char,
            "comment_prefix": self.comment_prefix,
            "name_column": self.name_column,
            "email_column": self.email_column,
            "license_url_column": self.license_url_column,
            "maintainer_column": self.maintainer_column,
            "spdx_license": self.spdx_license,
            "license_url": self.license_url,
            "maintainer_email": self.maintainer_email,
            "max_contributors": self.max_contributors,
            "contributor_selection": self.contributor_selection.value,
            "include": list(self.include),
            "exclude": list(self.exclude),
        }
        if self.manual_contributors:
            data["manual_contributors"] = [c.to_dict() for c in self.manual_contributors]
        return data

    def thaw(self) -> MutableConfig:
        """Return a mutable builder initialized from this snapshot."""
        return MutableConfig(
            width=self.width,
            separator_char=self.separator_char,
            comment_prefix=self.comment_prefix,
            name_column=self.name_column,
            email_column=self.email_column,
            license_url_column=self.license_url_column,
            maintainer_column=self.maintainer_column,
            spdx_license=self.spdx_license,
            license_url=self.license_url,
            maintainer_email=self.maintainer_email,
            max_contributors=self.max_contributors,
            contributor_selection=self.contributor_selection.value,
            manual_contributors=list(self.manual_contributors),
            include=list(self.include),
            exclude=list(self.exclude),
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Layerable configuration draft.

    ``None`` means the layer does not set the field. Lists replace the lower
    layer's list wholesale; they are never concatenated.
    """

    width: int | None = None
    separator_char: str | None = None
    comment_prefix: str | None = None
    name_column: int | None = None
    email_column: int | None = None
    license_url_column: int | None = None
    maintainer_column: int | None = None
    spdx_license: str | None = None
    license_url: str | None = None
    maintainer_email: str | None = None
    max_contributors: int | None = None
    # Kept as the raw string until freeze so unknown values can be reported
    contributor_selection: str | None = None
    manual_contributors: list[Contributor] | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None

    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the built-in defaults."""
        return cls(
            width=DEFAULT_WIDTH,
            separator_char=DEFAULT_SEPARATOR_CHAR,
            comment_prefix=DEFAULT_COMMENT_PREFIX,
            name_column=DEFAULT_NAME_COLUMN,
            email_column=DEFAULT_EMAIL_COLUMN,
            license_url_column=DEFAULT_LICENSE_URL_COLUMN,
            maintainer_column=DEFAULT_MAINTAINER_COLUMN,
            spdx_license="",
            license_url="",
            maintainer_email="",
            max_contributors=DEFAULT_MAX_CONTRIBUTORS,
            contributor_selection=DEFAULT_CONTRIBUTOR_SELECTION.value,
            manual_contributors=[],
            include=list(DEFAULT_INCLUDE),
            exclude=list(DEFAULT_EXCLUDE),
        )

    @classmethod
    def from_mapping(
        cls,
        data: ConfigTable,
        config_file: Path | None = None,
        *,
        camel_case: bool = False,
    ) -> MutableConfig:
        """Create a draft from a parsed config table.

        Args:
            data (ConfigTable): The ``ante`` table (TOML) or object (JSON).
            config_file (Path | None): Where ``data`` came from, recorded as provenance.
            camel_case (bool): Whether keys are camelCase (JSON manifests).

        Returns:
            MutableConfig: The draft. Malformed values are skipped and reported in
                ``diagnostics``.
        """
        table: ConfigTable = normalize_keys(data) if camel_case else dict(data)
        diags: list[Diagnostic] = []
        source = str(config_file) if config_file is not None else "<mapping>"

        for key in sorted(set(table) - KNOWN_KEYS):
            message = f"Unknown configuration key '{key}' in {source}"
            logger.warning(message)
            diags.append(Diagnostic(DiagnosticLevel.WARNING, message))

        draft = cls(diagnostics=diags)
        for key in _INT_KEYS:
            setattr(draft, key, get_int_value_or_none(table, key, diags))
        for key in _STR_KEYS:
            setattr(draft, key, get_string_value_or_none(table, key, diags))
        for key in _LIST_KEYS:
            setattr(draft, key, get_string_list_or_none(table, key, diags))
        draft.contributor_selection = get_string_value_or_none(
            table, "contributor_selection", diags
        )

        entries = get_table_list_or_none(table, "manual_contributors", diags)
        if entries is not None:
            contributors: list[Contributor] = []
            for entry in entries:
                name = entry.get("name")
                email = entry.get("email")
                if isinstance(name, str) and isinstance(email, str) and name and email:
                    contributors.append(Contributor(name=name, email=email))
                else:
                    message = f"Ignoring manual contributor without name and email: {entry!r}"
                    logger.warning(message)
                    diags.append(Diagnostic(DiagnosticLevel.WARNING, message))
            draft.manual_contributors = contributors

        if config_file is not None:
            draft.config_files = [config_file]
        logger.debug("Parsed config draft from %s: %s", source, draft)
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        merged: dict[str, Any] = {}
        for f in fields(self):
            if f.name in ("config_files", "diagnostics"):
                continue
            theirs = getattr(other, f.name)
            merged[f.name] = theirs if theirs is not None else getattr(self, f.name)
        return MutableConfig(
            **merged,
            config_files=self.config_files + other.config_files,
            diagnostics=self.diagnostics + other.diagnostics,
        )

    def freeze(self) -> Config:
        """Resolve this draft into an immutable `Config`.

        Unset fields take the defaults. Suspect values are kept (or clamped
        where the engine could not use them) and reported as diagnostics.
        """
        diags: list[Diagnostic] = list(self.diagnostics)

        def note(level: DiagnosticLevel, message: str) -> None:
            log = logger.warning if level is DiagnosticLevel.WARNING else logger.info
            log(message)
            diags.append(Diagnostic(level, message))

        width = _value(self.width, DEFAULT_WIDTH)
        if width < 0:
            note(DiagnosticLevel.WARNING, f"width {width} is negative; separators collapse")

        separator_char = _value(self.separator_char, DEFAULT_SEPARATOR_CHAR)
        if not separator_char:
            note(DiagnosticLevel.WARNING, "separator_char is empty; using '-'")
            separator_char = DEFAULT_SEPARATOR_CHAR
        elif any(c not in SEPARATOR_CHARS for c in separator_char):
            note(
                DiagnosticLevel.WARNING,
                f"separator_char {separator_char!r} is not one of '{SEPARATOR_CHARS}'; "
                "generated headers will not parse back",
            )

        comment_prefix = _value(self.comment_prefix, DEFAULT_COMMENT_PREFIX)
        name_column = _value(self.name_column, DEFAULT_NAME_COLUMN)
        room = name_column - len(comment_prefix)
        if room < DEFAULT_CONTINUATION_INDENT:
            note(
                DiagnosticLevel.INFO,
                f"name_column {name_column} leaves {room} column(s) after the comment "
                f"prefix; continuation lines are recognized with {max(1, room)} "
                "space(s) of indentation",
            )

        max_contributors = _value(self.max_contributors, DEFAULT_MAX_CONTRIBUTORS)
        if max_contributors < 0:
            note(DiagnosticLevel.WARNING, f"max_contributors {max_contributors} is negative; using 0")
            max_contributors = 0

        raw_selection = _value(self.contributor_selection, DEFAULT_CONTRIBUTOR_SELECTION.value)
        selection = ContributorSelection.from_name(raw_selection)
        if selection is None:
            note(
                DiagnosticLevel.WARNING,
                f"Unknown contributor_selection {raw_selection!r}; "
                f"using '{DEFAULT_CONTRIBUTOR_SELECTION.value}'",
            )
            selection = DEFAULT_CONTRIBUTOR_SELECTION

        spdx_license = _value(self.spdx_license, "")
        license_url = _value(self.license_url, "") or derive_license_url(spdx_license)

        return Config(
            width=width,
            separator_char=separator_char,
            comment_prefix=comment_prefix,
            name_column=name_column,
            email_column=_value(self.email_column, DEFAULT_EMAIL_COLUMN),
            license_url_column=_value(self.license_url_column, DEFAULT_LICENSE_URL_COLUMN),
            maintainer_column=_value(self.maintainer_column, DEFAULT_MAINTAINER_COLUMN),
            spdx_license=spdx_license,
            license_url=license_url,
            maintainer_email=_value(self.maintainer_email, ""),
            max_contributors=max_contributors,
            contributor_selection=selection,
            manual_contributors=tuple(_value(self.manual_contributors, [])),
            include=tuple(_value(self.include, list(DEFAULT_INCLUDE))),
            exclude=tuple(_value(self.exclude, list(DEFAULT_EXCLUDE))),
            config_files=tuple(self.config_files),
            diagnostics=tuple(diags),
        )


def _value(value: Any, default: Any) -> Any:
    return default if value is None else value


def resolve_config(**overrides: Any) -> Config:
    """Return the defaults overlaid with keyword overrides.

    Keys are `Config` field names. ``contributor_selection`` accepts either a
    `ContributorSelection` or its string value; list fields accept any
    iterable of strings.

    Raises:
        TypeError: If an override names an unknown field.
    """
    unknown = set(overrides) - KNOWN_KEYS
    if unknown:
        raise TypeError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")

    values = dict(overrides)
    selection = values.get("contributor_selection")
    if isinstance(selection, ContributorSelection):
        values["contributor_selection"] = selection.value
    for key in ("include", "exclude", "manual_contributors"):
        if values.get(key) is not None:
            values[key] = list(values[key])

    draft = replace(MutableConfig.from_defaults(), **values)
    return draft.freeze()
