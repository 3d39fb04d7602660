from __future__ import annotations

import logging
from typing import Any

from league_bracket.core.config import Settings, settings
from league_bracket.ingestion.providers.base.client import BaseHttpClient
from league_bracket.ingestion.providers.base.errors import ProviderRequestError
from league_bracket.ingestion.providers.challonge.parser import (
    parse_matches,
    parse_participants,
    parse_tournament,
)
from league_bracket.ingestion.providers.challonge.types import (
    ExternalMatch,
    Participant,
    Tournament,
)

logger = logging.getLogger(__name__)


class ChallongeClient:
    """Read-only access to the Challonge v1 API.

    The api key travels as the `api_key` query parameter and is never logged.
    """

    def __init__(self, *, http: BaseHttpClient, api_key: str | None = None) -> None:
        self.http = http
        self.api_key = api_key or settings.require_challonge_api_key()

    def _params(self) -> dict[str, str]:
        return {"api_key": self.api_key}

    async def _get(self, path: str, *, tournament_id: str) -> Any:
        logger.debug("GET %s", path)
        try:
            return await self.http.get_json_value(path, params=self._params())
        except ProviderRequestError as e:
            # Re-raise with the tournament attached so callers can report it.
            raise type(e)(
                f"Challonge request failed for tournament {tournament_id!r}: {e}",
                status_code=e.status_code,
                tournament_id=tournament_id,
            ) from e

    async def get_tournament(self, tournament_id: str) -> Tournament:
        payload = await self._get(f"tournaments/{tournament_id}.json", tournament_id=tournament_id)
        if not isinstance(payload, dict):
            raise ProviderRequestError(
                f"Expected JSON object for tournament {tournament_id!r}, got {type(payload)}",
                tournament_id=tournament_id,
            )
        return parse_tournament(payload, tournament_id=tournament_id)

    async def get_matches(self, tournament_id: str) -> list[ExternalMatch]:
        items = await self._get(
            f"tournaments/{tournament_id}/matches.json", tournament_id=tournament_id
        )
        return parse_matches(items, tournament_id=tournament_id)

    async def get_participants(self, tournament_id: str) -> list[Participant]:
        items = await self._get(
            f"tournaments/{tournament_id}/participants.json", tournament_id=tournament_id
        )
        return parse_participants(items, tournament_id=tournament_id)

    async def aclose(self) -> None:
        await self.http.aclose()


def build_challonge_client(cfg: Settings = settings) -> ChallongeClient:
    """Client wired from settings; fails before any request when the key is missing."""

    api_key = cfg.require_challonge_api_key()
    http = BaseHttpClient(base_url=cfg.challonge_base_url, timeout_s=cfg.http_timeout_s)
    return ChallongeClient(http=http, api_key=api_key)
