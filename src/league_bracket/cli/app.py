from __future__ import annotations

import typer

from league_bracket.cli.db import app as db_app
from league_bracket.cli.ingest import app as ingest_app
from league_bracket.core.config import settings
from league_bracket.core.logging import configure_logging

app = typer.Typer(no_args_is_help=True)
app.add_typer(ingest_app, name="ingest")
app.add_typer(db_app, name="db")


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Root log level."),
) -> None:
    configure_logging(log_level)
