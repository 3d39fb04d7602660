from __future__ import annotations

import httpx
import pytest

from league_bracket.core.config import MissingCredentialError, Settings
from league_bracket.ingestion.providers.base.client import BaseHttpClient
from league_bracket.ingestion.providers.base.errors import (
    ProviderMappingError,
    ProviderRateLimited,
    ProviderRequestError,
)
from league_bracket.ingestion.providers.challonge.client import (
    ChallongeClient,
    build_challonge_client,
)


def _client(handler) -> ChallongeClient:
    transport = httpx.MockTransport(handler)
    http = BaseHttpClient(base_url="https://api.challonge.com/v1", transport=transport)
    return ChallongeClient(http=http, api_key="secret-key")


@pytest.mark.asyncio
async def test_challonge_client_parses_matches() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/tournaments/rvl_s3/matches.json"
        assert request.url.params["api_key"] == "secret-key"
        data = [
            {
                "match": {
                    "id": 1001,
                    "round": 1,
                    "suggested_play_order": 4,
                    "state": "complete",
                    "player1_id": 11,
                    "player2_id": 12,
                    "scores_csv": "25-20,20-25,25-22",
                }
            },
            {
                "match": {
                    "id": 1002,
                    "round": -1,
                    "state": "pending",
                    "player1_id": None,
                    "player2_id": None,
                    "scores_csv": None,
                }
            },
            {"unexpected": "shape"},
        ]
        return httpx.Response(200, json=data)

    client = _client(handler)
    matches = await client.get_matches("rvl_s3")
    await client.aclose()

    assert [m.id for m in matches] == ["1001", "1002"]
    first, second = matches
    assert first.match_number == 4
    assert first.is_complete and first.is_seeded
    assert first.scores_csv == "25-20,20-25,25-22"
    assert second.round == -1
    assert not second.is_seeded
    assert second.scores_csv == ""


@pytest.mark.asyncio
async def test_challonge_client_parses_tournament_and_participants() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/participants.json"):
            return httpx.Response(
                200,
                json=[
                    {"participant": {"id": 11, "name": "AS Roma", "group_player_ids": [301]}},
                    {"participant": {"id": 12, "name": "", "username": "inter_vb"}},
                ],
            )
        return httpx.Response(
            200, json={"tournament": {"id": 555, "name": "RVL Season 3", "state": "underway"}}
        )

    client = _client(handler)
    tournament = await client.get_tournament("rvl_s3")
    participants = await client.get_participants("rvl_s3")
    await client.aclose()

    assert tournament.name == "RVL Season 3"
    assert tournament.id == "555"
    assert participants[0].group_player_ids == (301,)
    assert participants[1].display_name == "inter_vb"


@pytest.mark.asyncio
async def test_non_2xx_carries_status_and_tournament_without_leaking_key() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"errors": ["Requested tournament not found"]})

    client = _client(handler)
    with pytest.raises(ProviderRequestError) as excinfo:
        await client.get_tournament("missing_cup")
    await client.aclose()

    assert excinfo.value.status_code == 404
    assert excinfo.value.tournament_id == "missing_cup"
    assert "secret-key" not in str(excinfo.value)


@pytest.mark.asyncio
async def test_rate_limit_is_reported_as_such() -> None:
    client = _client(lambda request: httpx.Response(429))
    with pytest.raises(ProviderRateLimited) as excinfo:
        await client.get_matches("rvl_s3")
    await client.aclose()

    assert excinfo.value.status_code == 429
    assert excinfo.value.tournament_id == "rvl_s3"


@pytest.mark.asyncio
async def test_tournament_payload_without_wrapper_is_a_mapping_error() -> None:
    client = _client(
        lambda request: httpx.Response(200, json={"errors": ["Requested tournament not found"]})
    )
    with pytest.raises(ProviderMappingError):
        await client.get_tournament("missing_cup")
    await client.aclose()


def test_missing_api_key_fails_before_any_request() -> None:
    with pytest.raises(MissingCredentialError):
        build_challonge_client(Settings(challonge_api_key=None))
