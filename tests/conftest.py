"""Shared pytest fixtures for isoperiod tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ISOPERIOD_* settings out of every test."""
    for name in list(os.environ):
        if name.startswith("ISOPERIOD_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("isoperiod")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp directory so no stray config file is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``; tests that need
    to write a config file can request ``tmp_path`` as well (pytest
    deduplicates, so it is the same directory).
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path
