from __future__ import annotations

from typing import Any

from league_bracket.ingestion.providers.base.errors import ProviderMappingError
from league_bracket.ingestion.providers.challonge.types import (
    ExternalMatch,
    Participant,
    Tournament,
)

ApiItem = dict[str, Any]


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _as_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _unwrap(item: Any, key: str) -> ApiItem | None:
    # Challonge v1 wraps every record: {"match": {...}}, {"participant": {...}}.
    if not isinstance(item, dict) or key not in item:
        return None
    inner = item[key]
    return inner if isinstance(inner, dict) else None


def parse_tournament(payload: ApiItem, *, tournament_id: str) -> Tournament:
    obj = _unwrap(payload, "tournament")
    if obj is None:
        raise ProviderMappingError(
            "Tournament response missing 'tournament' object",
            context={"tournament_id": tournament_id},
        )

    return Tournament(
        id=str(obj.get("id") or tournament_id),
        name=_as_str(obj.get("name")) or tournament_id,
        url=_as_str(obj.get("full_challonge_url")) or _as_str(obj.get("url")),
        state=_as_str(obj.get("state")),
        tournament_type=_as_str(obj.get("tournament_type")),
    )


def parse_match(item: Any) -> ExternalMatch | None:
    obj = _unwrap(item, "match")
    if obj is None:
        return None

    match_id = obj.get("id")
    round_number = _as_int(obj.get("round"))
    if match_id is None or round_number is None:
        return None

    match_number = (
        _as_int(obj.get("match_number"))
        or _as_int(obj.get("suggested_play_order"))
        or _as_int(match_id)
        or 0
    )

    return ExternalMatch(
        id=str(match_id),
        match_number=match_number,
        round=round_number,
        state=_as_str(obj.get("state")) or "pending",
        player1_id=_as_int(obj.get("player1_id")),
        player2_id=_as_int(obj.get("player2_id")),
        player1_name=_as_str(obj.get("player1_name")),
        player2_name=_as_str(obj.get("player2_name")),
        scores_csv=obj.get("scores_csv") if isinstance(obj.get("scores_csv"), str) else "",
    )


def parse_matches(items: Any, *, tournament_id: str) -> list[ExternalMatch]:
    if not isinstance(items, list):
        raise ProviderMappingError(
            f"Expected list of matches, got {type(items).__name__}",
            context={"tournament_id": tournament_id},
        )

    matches: list[ExternalMatch] = []
    for item in items:
        match = parse_match(item)
        if match is not None:
            matches.append(match)
    return matches


def parse_participant(item: Any) -> Participant | None:
    obj = _unwrap(item, "participant")
    if obj is None:
        return None

    participant_id = _as_int(obj.get("id"))
    if participant_id is None:
        return None

    group_ids = obj.get("group_player_ids")
    group_player_ids: tuple[int, ...] = ()
    if isinstance(group_ids, list):
        group_player_ids = tuple(i for i in (_as_int(g) for g in group_ids) if i is not None)

    return Participant(
        id=participant_id,
        name=_as_str(obj.get("name")) or _as_str(obj.get("display_name")),
        username=_as_str(obj.get("username")) or _as_str(obj.get("challonge_username")),
        group_player_ids=group_player_ids,
    )


def parse_participants(items: Any, *, tournament_id: str) -> list[Participant]:
    if not isinstance(items, list):
        raise ProviderMappingError(
            f"Expected list of participants, got {type(items).__name__}",
            context={"tournament_id": tournament_id},
        )

    participants: list[Participant] = []
    for item in items:
        participant = parse_participant(item)
        if participant is not None:
            participants.append(participant)
    return participants
