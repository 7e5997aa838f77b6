# topmark:header:start
#
#   project      : Ante
#   file         : config_resolver.py
#   file_relpath : src/ante/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Build the effective `Config` from Click parameters."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ante.cli.errors import AnteConfigError
from ante.config.io import ConfigError
from ante.config.logging import get_logger
from ante.config.model import MutableConfig
from ante.config.sources import load_config
from ante.core.diagnostics import DiagnosticLevel, compute_diagnostic_stats

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ante.cli.console import ConsoleLike
    from ante.config.logging import AnteLogger
    from ante.config.model import Config

logger: AnteLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    console: ConsoleLike,
    verbosity_level: int,
    config_path: str | None,
    include_patterns: Sequence[str] = (),
    exclude_patterns: Sequence[str] = (),
    start: Path | None = None,
) -> Config:
    """Load the configuration for a command.

    Resolution order, lowest to highest precedence: built-in defaults, the
    explicit ``--config`` file or the nearest discovered source, then the
    ``--include``/``--exclude`` options.

    Warnings found while resolving are printed; info-level diagnostics only
    with ``-v``.

    Raises:
        AnteConfigError: If a config source cannot be read or parsed.
    """
    overrides = MutableConfig(
        include=list(include_patterns) or None,
        exclude=list(exclude_patterns) or None,
    )
    try:
        config = load_config(
            Path(config_path) if config_path else None,
            start=start,
            overrides=overrides,
        )
    except ConfigError as e:
        raise AnteConfigError(str(e)) from e

    logger.debug("Effective config from %s: %s", config.config_files, config)
    for diag in config.diagnostics:
        if diag.level is DiagnosticLevel.INFO and verbosity_level < 1:
            continue
        console.warn(diag.render(color=False))

    stats = compute_diagnostic_stats(config.diagnostics)
    if stats.total and verbosity_level > 0:
        console.warn(
            f"Configuration: {stats.n_warning} warning(s), {stats.n_info} info message(s)"
        )
    return config
