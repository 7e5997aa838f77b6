# topmark:header:start
#
#   project      : Ante
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Pytest configuration for the Ante test suite.

Sets up global fixtures and the logging configuration used during test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `make_config` (or `MutableConfig` then ``freeze()``) and never
    mutate a frozen `Config`. To tweak one, call `Config.thaw()`, edit the
    returned draft, then freeze again.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from ante.config import logging
from ante.config.model import resolve_config

if TYPE_CHECKING:
    from pathlib import Path

    from ante.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_git: DecoratorType[Any] = as_typed_mark(pytest.mark.git)

HAS_GIT: bool = shutil.which("git") is not None

requires_git: DecoratorType[Any] = as_typed_mark(
    pytest.mark.skipif(not HAS_GIT, reason="git executable not available")
)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and keyword overrides."""
    return resolve_config(**overrides)


@pytest.fixture(autouse=True)
def silence_ante_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to drop ``ANTE_LOG_LEVEL``.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failing tests show the full story.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty project directory.

    Returns:
        Path: The project directory, also the current working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def git(repo: Path, *args: str, env: dict[str, str] | None = None) -> str:
    """Run git in ``repo`` and return its stdout; fail the test on error."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=False,
        env=env,
    )
    assert result.returncode == 0, result.stderr
    return result.stdout


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create an initialized repository with a configured user.

    Global and system git configuration are ignored so the user identity is
    always the one set here.

    Returns:
        Path: The repository working tree.
    """
    if not HAS_GIT:
        pytest.skip("git executable not available")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    repo: Path = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "config", "user.name", "Jane Doe")
    git(repo, "config", "user.email", "jane@example.com")
    git(repo, "config", "commit.gpgsign", "false")
    return repo


def commit_file(
    repo: Path,
    rel: str,
    content: str,
    *,
    author: tuple[str, str] | None = None,
    date: str | None = None,
) -> None:
    """Write ``rel`` and commit it, optionally as another author or at a given date."""
    target: Path = repo / rel
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    git(repo, "add", "--", rel)
    args = ["commit", "-q", "-m", f"update {rel}"]
    if author is not None:
        args.append(f"--author={author[0]} <{author[1]}>")
    if date is not None:
        args.append(f"--date={date}")
    git(repo, *args)
