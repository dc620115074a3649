"""Tests for the tax CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from labcheck.cli import cli


class TestTaxCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tax", "100", "--rate", "10"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "OK: compute_tax"
        assert "  tax: 10.00" in lines
        assert "  total: 110.00" in lines

    def test_json_is_unrounded(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "tax", "99.99", "--rate", "10"])
        data = json.loads(result.stdout)["data"]
        assert data["total"] == pytest.approx(109.989)

    def test_default_rate(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "tax", "100"])
        assert json.loads(result.stdout)["data"]["rate"] == 12.0

    def test_env_default_rate(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LABCHECK_TAX__DEFAULT_RATE", "19")
        result = cli_runner.invoke(cli, ["-q", "tax", "100"])
        assert result.stdout.strip() == "119.00"

    def test_negative_amount(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "tax", "--", "-1"])
        assert result.exit_code == 1
        error = json.loads(result.stderr)["error"]
        assert error["code"] == "INVALID_ARGUMENT"
        assert error["detail"]["argument"] == "amount"

    def test_negative_rate(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "tax", "100", "--rate=-1"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["detail"]["argument"] == "rate"

    def test_non_numeric_amount(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tax", "abc"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("amount", ["nan", "inf"])
    def test_non_finite_amount(self, cli_runner: CliRunner, amount: str) -> None:
        result = cli_runner.invoke(cli, ["--json", "tax", amount])
        assert result.exit_code == 1
        assert result.stdout == ""
        error = json.loads(result.stderr)["error"]
        assert error["code"] == "INVALID_ARGUMENT"
        assert error["detail"]["argument"] == "amount"

    def test_non_finite_rate(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tax", "100", "--rate", "nan"])
        assert result.exit_code == 1
        assert "Tax rate must be a finite number" in result.stderr
