from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from league_bracket.db.enums import MatchPhaseEnum, MatchStatusEnum, RegionEnum
from league_bracket.db.models.core.match import Match
from league_bracket.db.models.core.season import Season
from league_bracket.ingestion.providers.challonge.types import (
    ExternalMatch,
    Participant,
    Tournament,
)


class SeasonLookup(Protocol):
    async def get_season(self, season_id: int) -> Season | None: ...


class TeamCatalog(Protocol):
    async def find_logo_by_name(self, name: str) -> str | None:
        """Logo of the team whose name matches case-insensitively, if any."""
        ...


class MatchWriter(Protocol):
    async def create_match(self, new: NewMatch) -> Match: ...


@dataclass(frozen=True)
class NewMatch:
    """Everything needed to persist one imported match."""

    season_id: int
    match_number: str
    status: MatchStatusEnum
    round: str
    date: datetime
    team1_name: str
    team2_name: str
    team1_score: int
    team2_score: int
    set_scores: Sequence[str | None] = ()
    team1_logo_url: str | None = None
    team2_logo_url: str | None = None
    challonge_match_id: str | None = None
    challonge_tournament_id: str | None = None
    challonge_round: int | None = None
    phase: MatchPhaseEnum = MatchPhaseEnum.QUALIFIERS
    region: RegionEnum = RegionEnum.NA
    tags: Sequence[str] = field(default_factory=tuple)


class TournamentSource(Protocol):
    """Remote bracket reads needed by the importer (see ChallongeClient)."""

    async def get_tournament(self, tournament_id: str) -> Tournament: ...

    async def get_matches(self, tournament_id: str) -> list[ExternalMatch]: ...

    async def get_participants(self, tournament_id: str) -> list[Participant]: ...
