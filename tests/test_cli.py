"""Tests for the root isoperiod CLI."""

import pytest
from click.testing import CliRunner

from isoperiod import __version__
from isoperiod.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "isoperiod" in result.output
    for name in ("parse", "check", "negate"):
        assert name in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_unknown_command(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["frobnicate"])
    assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_cwd")
def test_verbose_logs_rejections(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "parse", "PY"])
    assert result.exit_code == 1
    assert "Rejected period" in result.stderr
