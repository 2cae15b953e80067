"""Fixtures shared by CLI command tests."""

from __future__ import annotations

import json
from typing import Any

import pytest
from click.testing import CliRunner

from patternctl.cli import cli


@pytest.fixture(autouse=True)
def _cli_env(isolated_cwd, _restore_logging) -> None:
    """Every CLI test runs in an empty directory with logging restored after."""


@pytest.fixture
def run_json(cli_runner: CliRunner):
    """Invoke ``patternctl --json ARGS`` and return (exit_code, parsed payload)."""

    def _run(*args: str) -> tuple[int, dict[str, Any]]:
        result = cli_runner.invoke(cli, ["--json", *args])
        return result.exit_code, json.loads(result.output)

    return _run
