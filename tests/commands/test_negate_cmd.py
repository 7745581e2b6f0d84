"""Tests for the negate command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from isoperiod.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestNegateCommand:
    def test_positive_becomes_negative(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "negate", "P3D"])
        assert result.exit_code == 0
        assert result.stdout == "-P3D\n"

    def test_negative_becomes_positive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "negate", "--", "-PT1.5S"])
        assert result.exit_code == 0
        assert result.stdout == "PT1.5S\n"

    def test_zero_stays_unsigned(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "negate", "P0"])
        assert result.exit_code == 0
        assert result.stdout == "P0D\n"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "negate", "P1Y"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "negate"
        assert data["data"]["components"]["negative"] is True

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["negate", "P1.5D"])
        assert result.exit_code == 1
        assert "malformed number before the 'D' designator" in result.stderr

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["negate", "--examples"])
        assert result.exit_code == 0
        assert "isoperiod negate P3D" in result.output
