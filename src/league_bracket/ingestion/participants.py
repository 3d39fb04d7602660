from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from league_bracket.ingestion.providers.challonge.types import Participant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedParticipant:
    name: str
    logo_url: str | None = None


def synthetic_name(participant_id: int) -> str:
    return f"Player {participant_id}"


def find_participant(
    participant_id: int, participants: Sequence[Participant]
) -> Participant | None:
    """
    Look a bracket participant up by id.

    A participant's own id wins over a group-stage id. Falls back to treating
    the id as a 1-based seed position, which is what some brackets hand back
    instead of stable participant ids.
    """
    for participant in participants:
        if participant.id == participant_id:
            return participant

    for participant in participants:
        if participant_id in participant.group_player_ids:
            return participant

    if 1 <= participant_id <= len(participants):
        return participants[participant_id - 1]

    return None


def resolve_participant_name(
    participant_id: int,
    participants: Sequence[Participant],
    *,
    reported_name: str | None = None,
) -> str:
    """Best display name for one side of a match; never empty."""

    if reported_name:
        return reported_name

    participant = find_participant(participant_id, participants)
    if participant is not None and participant.display_name:
        return participant.display_name

    logger.debug("No participant name for id=%s; using synthetic label", participant_id)
    return synthetic_name(participant_id)
