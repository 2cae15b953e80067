"""Shared pytest fixtures for patternctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from patternctl.config.settings import PatternSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp directory with no config overrides in the env.

    Walk-up discovery starts at the working directory, so this keeps any
    ``patternctl.toml`` above the checkout out of the test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PATTERNCTL_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def settings(isolated_cwd: Path) -> PatternSettings:
    """Settings built from code defaults only."""
    return PatternSettings.from_cli(search_root=isolated_cwd)


@pytest.fixture
def write_config(isolated_cwd: Path):
    """Write a ``patternctl.toml`` into the isolated working directory."""

    def _write(body: str) -> Path:
        path = isolated_cwd / "patternctl.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def _restore_logging() -> Generator[None]:
    """Restore root logger state after a test that configures logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("patternctl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
