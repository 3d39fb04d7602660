from __future__ import annotations

import asyncio

import typer

from league_bracket.core.config import settings
from league_bracket.db import DatabaseConfig, create_all, create_db_engine

app = typer.Typer(help="Local database helpers.")


async def _create_all() -> None:
    engine = create_db_engine(
        DatabaseConfig(database_url=settings.database_url, echo=settings.db_echo)
    )
    try:
        await create_all(engine)
    finally:
        await engine.dispose()


@app.command("create-all")
def create_all_cmd() -> None:
    """Create missing tables directly (use alembic for real deployments)."""

    asyncio.run(_create_all())
    typer.echo("Tables created.")
