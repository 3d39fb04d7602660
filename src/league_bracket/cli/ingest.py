from __future__ import annotations

import asyncio
from datetime import datetime, timedelta

import typer

from league_bracket.cli.common import session_scope
from league_bracket.core.config import MissingCredentialError, settings
from league_bracket.db.enums import MatchPhaseEnum, RegionEnum
from league_bracket.db.models.core.match import Match
from league_bracket.db.repos.core.match_repo import MatchRepository
from league_bracket.db.repos.core.season_repo import SeasonRepository
from league_bracket.db.repos.core.team_repo import TeamRepository
from league_bracket.ingestion.dates import parse_iso_datetime
from league_bracket.ingestion.errors import TournamentImportError
from league_bracket.ingestion.providers.base.errors import ProviderError
from league_bracket.ingestion.providers.challonge.client import build_challonge_client
from league_bracket.ingestion.providers.challonge.ingest.tournament_matches import (
    ImportRequest,
    ImportSummary,
    TournamentImporter,
)

app = typer.Typer(help="Import bracket data into the league DB.")


async def _import_challonge_tournament(request: ImportRequest) -> tuple[list[Match], ImportSummary]:
    client = build_challonge_client(settings)
    try:
        async with session_scope() as session:
            importer = TournamentImporter(
                client=client,
                seasons=SeasonRepository(session),
                teams=TeamRepository(session),
                matches=MatchRepository(session),
            )
            created = await importer.run(request)
            return created, importer.summary
    finally:
        await client.aclose()


def _parse_when(value: str, option: str) -> datetime:
    try:
        return parse_iso_datetime(value)
    except ValueError as e:
        raise typer.BadParameter(f"{value!r} is not an ISO-8601 datetime", param_hint=option) from e


def _parse_tags(values: list[str]) -> tuple[str, ...]:
    tags: list[str] = []
    for value in values:
        tags.extend(t.strip() for t in value.split(",") if t.strip())
    return tuple(tags)


@app.command("challonge-tournament")
def ingest_challonge_tournament_cmd(
    tournament: str = typer.Option(
        ...,
        "--tournament",
        help="Challonge tournament URL or id (e.g. https://challonge.com/rvl_s3).",
    ),
    season_id: int = typer.Option(..., "--season-id", help="Internal season id."),
    round_start: str = typer.Option(
        ..., "--round-start", help="Round start, ISO-8601 (e.g. 2025-03-03T00:00:00Z)."
    ),
    round_end: str = typer.Option(..., "--round-end", help="Round end, ISO-8601."),
    round_filter: int | None = typer.Option(
        None, "--round", help="Only import this Challonge round (default: all rounds)."
    ),
    spacing_minutes: int = typer.Option(
        settings.default_match_spacing_minutes,
        "--spacing-minutes",
        min=15,
        max=120,
        help="Minutes between scheduled matches on the same day.",
    ),
    tags: list[str] = typer.Option(
        [], "--tag", help="Tag applied to every imported match (repeatable or comma-separated)."
    ),
    phase: MatchPhaseEnum = typer.Option(MatchPhaseEnum.QUALIFIERS, "--phase"),
    region: RegionEnum = typer.Option(RegionEnum.NA, "--region"),
) -> None:
    """Fetch a Challonge tournament and create one league match per seeded bracket match."""

    start = _parse_when(round_start, "--round-start")
    end = _parse_when(round_end, "--round-end")
    if end <= start:
        raise typer.BadParameter("must be after --round-start", param_hint="--round-end")

    request = ImportRequest(
        tournament_ref=tournament,
        season_id=season_id,
        round_start=start,
        round_end=end,
        round_filter=round_filter,
        match_spacing=timedelta(minutes=spacing_minutes),
        tags=_parse_tags(tags),
        phase=phase,
        region=region,
    )

    try:
        created, summary = asyncio.run(_import_challonge_tournament(request))
    except (MissingCredentialError, TournamentImportError, ProviderError) as e:
        typer.echo(f"Import failed: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(
        " ".join(
            [
                f"Imported {summary.tournament_name!r} ({summary.tournament_id}):",
                f"matches_seen={summary.matches_seen}",
                f"matches_created={len(created)}",
                f"skipped_other_round={summary.skipped_other_round}",
                f"skipped_unseeded={summary.skipped_unseeded}",
            ]
        )
    )
    if summary.participant_lookup_failed:
        typer.echo("Warning: participant list unavailable; some teams use synthetic names.")
