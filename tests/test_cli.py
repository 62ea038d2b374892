"""Mini README: Tests for the Typer entry point."""

from __future__ import annotations

from typer.testing import CliRunner

from run_dashboard import cli


def test_summary_prints_demo_totals() -> None:
    result = CliRunner().invoke(cli, ["summary"])

    assert result.exit_code == 0
    assert "Transactions: 5" in result.output
    assert "4350.00" in result.output
    assert "Housing" in result.output
