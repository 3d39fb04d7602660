from __future__ import annotations

from typer.testing import CliRunner

from league_bracket.cli.app import app


def test_cli_help_smoke() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "ingest" in result.stdout


def test_ingest_rejects_round_end_before_start() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "ingest",
            "challonge-tournament",
            "--tournament",
            "rvl_s3",
            "--season-id",
            "1",
            "--round-start",
            "2025-03-10T00:00:00Z",
            "--round-end",
            "2025-03-03T00:00:00Z",
        ],
    )
    assert result.exit_code != 0
