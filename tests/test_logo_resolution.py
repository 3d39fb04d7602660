from __future__ import annotations

import pytest

from league_bracket.ingestion.logos import resolve_logo


class DictCatalog:
    def __init__(self, logos: dict[str, str | None]) -> None:
        self.logos = {k.lower(): v for k, v in logos.items()}

    async def find_logo_by_name(self, name: str) -> str | None:
        return self.logos.get(name.strip().lower())


class BrokenCatalog:
    async def find_logo_by_name(self, name: str) -> str | None:
        raise ConnectionError("catalog unavailable")


@pytest.mark.asyncio
async def test_resolve_logo_is_case_insensitive() -> None:
    outcome = await resolve_logo(DictCatalog({"AS Roma": "roma.png"}), "as ROMA")
    assert outcome.is_ok
    assert outcome.value == "roma.png"


@pytest.mark.asyncio
async def test_missing_team_is_not_an_error() -> None:
    outcome = await resolve_logo(DictCatalog({"AS Roma": "roma.png"}), "Benfica")
    assert outcome.is_ok
    assert outcome.value is None


@pytest.mark.asyncio
async def test_catalog_failure_is_reported_not_raised() -> None:
    outcome = await resolve_logo(BrokenCatalog(), "AS Roma")
    assert not outcome.is_ok
    assert isinstance(outcome.error, ConnectionError)
    assert outcome.value_or("fallback.png") == "fallback.png"
