# topmark:header:start
#
#   project      : Ante
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Logging setup: environment level resolution and the TRACE level."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from ante.config import logging as ante_logging


@pytest.fixture
def restore_root_level() -> Iterator[None]:
    yield
    ante_logging.setup_logging(level=ante_logging.TRACE_LEVEL)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", ante_logging.TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("fatal", logging.CRITICAL),
        ("15", 15),
        ("chatty", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None) -> None:
    monkeypatch.setenv(ante_logging.LOG_LEVEL_ENV_VAR, value)
    assert ante_logging.resolve_env_log_level() == expected


def test_setup_logging_defaults_to_critical(restore_root_level: None) -> None:
    ante_logging.setup_logging()
    root = logging.getLogger()
    assert root.level == logging.CRITICAL
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ante_logging.ChalkFormatter)


def test_setup_logging_honors_environment(
    monkeypatch: pytest.MonkeyPatch, restore_root_level: None
) -> None:
    monkeypatch.setenv(ante_logging.LOG_LEVEL_ENV_VAR, "DEBUG")
    ante_logging.setup_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = ante_logging.get_logger("ante.test")
    assert isinstance(logger, ante_logging.AnteLogger)
    with caplog.at_level(ante_logging.TRACE_LEVEL, logger="ante.test"):
        logger.trace("walking %s", "src")
    assert any(r.levelname == "TRACE" and r.getMessage() == "walking src" for r in caplog.records)
