from __future__ import annotations

from dataclasses import dataclass, field

COMPLETE_STATE = "complete"


@dataclass(frozen=True)
class Tournament:
    id: str
    name: str
    url: str | None = None
    state: str | None = None
    tournament_type: str | None = None


@dataclass(frozen=True)
class ExternalMatch:
    """One bracket match as reported by Challonge."""

    id: str
    match_number: int
    round: int
    state: str
    player1_id: int | None = None
    player2_id: int | None = None
    player1_name: str | None = None
    player2_name: str | None = None
    scores_csv: str = ""

    @property
    def is_complete(self) -> bool:
        return self.state == COMPLETE_STATE

    @property
    def is_seeded(self) -> bool:
        return self.player1_id is not None and self.player2_id is not None


@dataclass(frozen=True)
class Participant:
    id: int
    name: str | None = None
    username: str | None = None
    # Group-stage matches reference these instead of `id`.
    group_player_ids: tuple[int, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str | None:
        return self.name or self.username
