from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from league_bracket.db.enums import MatchPhaseEnum, MatchStatusEnum, RegionEnum
from league_bracket.db.models.core.match import Match
from league_bracket.ingestion.collaborators import (
    MatchWriter,
    NewMatch,
    SeasonLookup,
    TeamCatalog,
    TournamentSource,
)
from league_bracket.ingestion.errors import SeasonNotFoundError
from league_bracket.ingestion.logos import resolve_logo
from league_bracket.ingestion.outcome import Outcome
from league_bracket.ingestion.participants import resolve_participant_name
from league_bracket.ingestion.providers.base.errors import ProviderError
from league_bracket.ingestion.providers.challonge.tournament_ref import extract_tournament_id
from league_bracket.ingestion.providers.challonge.types import ExternalMatch, Participant
from league_bracket.ingestion.round_calendar import schedule_match_date
from league_bracket.ingestion.scores import (
    aggregate_set_scores,
    parse_set_scores,
    stored_set_scores,
)

logger = logging.getLogger(__name__)

DEFAULT_MATCH_SPACING = timedelta(minutes=30)


@dataclass(frozen=True)
class ImportRequest:
    tournament_ref: str
    season_id: int
    round_start: datetime
    round_end: datetime
    round_filter: int | None = None
    match_spacing: timedelta = DEFAULT_MATCH_SPACING
    tags: Sequence[str] = field(default_factory=tuple)
    phase: MatchPhaseEnum = MatchPhaseEnum.QUALIFIERS
    region: RegionEnum = RegionEnum.NA


@dataclass
class ImportSummary:
    tournament_id: str | None = None
    tournament_name: str | None = None
    matches_seen: int = 0
    skipped_other_round: int = 0
    skipped_unseeded: int = 0
    matches_created: int = 0
    participant_lookup_failed: bool = False


def _passes_round_filter(match: ExternalMatch, round_filter: int | None) -> bool:
    return round_filter is None or match.round == round_filter


def _schedule_round(round_number: int) -> int:
    # Losers-bracket rounds come back negative; they share the week of their winners round.
    return max(abs(round_number), 1)


class TournamentImporter:
    """
    One Challonge tournament import.

    Matches are handled strictly in the order the service returns them: the
    running match counter drives date placement, so nothing here runs
    concurrently. Holds the per-import participant cache; build a new importer
    for every import.
    """

    def __init__(
        self,
        *,
        client: TournamentSource,
        seasons: SeasonLookup,
        teams: TeamCatalog,
        matches: MatchWriter,
    ) -> None:
        self.client = client
        self.seasons = seasons
        self.teams = teams
        self.matches = matches
        self.summary = ImportSummary()
        self._participants: Outcome[list[Participant]] | None = None

    async def _participant_list(self, tournament_id: str) -> Outcome[list[Participant]]:
        if self._participants is None:
            try:
                participants = await self.client.get_participants(tournament_id)
            except ProviderError as e:
                logger.warning(
                    "Participant list unavailable for tournament %s; using synthetic names: %s",
                    tournament_id,
                    e,
                )
                self.summary.participant_lookup_failed = True
                self._participants = Outcome.failed(e)
            else:
                self._participants = Outcome.ok(participants)
        return self._participants

    async def _side_names(self, match: ExternalMatch, tournament_id: str) -> tuple[str, str]:
        assert match.player1_id is not None and match.player2_id is not None

        participants: list[Participant] = []
        if not (match.player1_name and match.player2_name):
            participants = (await self._participant_list(tournament_id)).value_or([])

        return (
            resolve_participant_name(
                match.player1_id, participants, reported_name=match.player1_name
            ),
            resolve_participant_name(
                match.player2_id, participants, reported_name=match.player2_name
            ),
        )

    async def _logo(self, name: str) -> str | None:
        outcome = await resolve_logo(self.teams, name)
        if not outcome.is_ok:
            logger.warning("Logo lookup failed for %r: %s", name, outcome.error)
        return outcome.value if outcome.is_ok else None

    async def run(self, request: ImportRequest) -> list[Match]:
        try:
            return await self._run(request)
        except Exception:
            logger.error(
                "Import of %s failed after %d created matches",
                self.summary.tournament_id or request.tournament_ref,
                self.summary.matches_created,
            )
            raise

    async def _run(self, request: ImportRequest) -> list[Match]:
        logger.info("Resolving season id=%s", request.season_id)
        season = await self.seasons.get_season(request.season_id)
        if season is None:
            raise SeasonNotFoundError(request.season_id)

        tournament_id = extract_tournament_id(request.tournament_ref)
        self.summary.tournament_id = tournament_id

        logger.info("Fetching Challonge tournament %s", tournament_id)
        tournament = await self.client.get_tournament(tournament_id)
        external_matches = await self.client.get_matches(tournament_id)
        self.summary.tournament_name = tournament.name
        self.summary.matches_seen = len(external_matches)

        total = sum(
            1
            for m in external_matches
            if _passes_round_filter(m, request.round_filter) and m.is_seeded
        )
        logger.info(
            "Importing %d of %d matches from %r (round=%s)",
            total,
            len(external_matches),
            tournament.name,
            request.round_filter if request.round_filter is not None else "all",
        )

        created: list[Match] = []
        match_index = 0
        for external in external_matches:
            if not _passes_round_filter(external, request.round_filter):
                self.summary.skipped_other_round += 1
                continue
            if not external.is_seeded:
                logger.debug("Skipping unseeded match %s", external.id)
                self.summary.skipped_unseeded += 1
                continue

            team1_name, team2_name = await self._side_names(external, tournament_id)
            team1_logo = await self._logo(team1_name)
            team2_logo = await self._logo(team2_name)

            sets = parse_set_scores(external.scores_csv)
            aggregate = aggregate_set_scores(sets)

            match_date = schedule_match_date(
                round_number=_schedule_round(external.round),
                round_start=request.round_start,
                round_end=request.round_end,
                match_index=match_index,
                total_matches_in_round=total,
                spacing=request.match_spacing,
                is_completed=external.is_complete,
            )

            new = NewMatch(
                season_id=season.id,
                match_number=f"Round {external.round} - Match {external.match_number}",
                status=(
                    MatchStatusEnum.COMPLETED if external.is_complete else MatchStatusEnum.SCHEDULED
                ),
                round=f"Round {external.round}",
                date=match_date,
                team1_name=team1_name,
                team2_name=team2_name,
                team1_score=aggregate.side_a,
                team2_score=aggregate.side_b,
                set_scores=stored_set_scores(sets),
                team1_logo_url=team1_logo,
                team2_logo_url=team2_logo,
                challonge_match_id=external.id,
                challonge_tournament_id=tournament_id,
                challonge_round=external.round,
                phase=request.phase,
                region=request.region,
                tags=tuple(request.tags),
            )
            created.append(await self.matches.create_match(new))
            match_index += 1
            self.summary.matches_created += 1

        logger.info(
            "Imported tournament %s: seen=%d created=%d skipped_round=%d skipped_unseeded=%d",
            tournament_id,
            self.summary.matches_seen,
            self.summary.matches_created,
            self.summary.skipped_other_round,
            self.summary.skipped_unseeded,
        )
        return created


async def import_from_tournament(
    request: ImportRequest,
    *,
    client: TournamentSource,
    seasons: SeasonLookup,
    teams: TeamCatalog,
    matches: MatchWriter,
) -> list[Match]:
    """Import every seeded match of a Challonge tournament into `season_id`."""

    importer = TournamentImporter(client=client, seasons=seasons, teams=teams, matches=matches)
    return await importer.run(request)
