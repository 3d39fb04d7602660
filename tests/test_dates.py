from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from league_bracket.ingestion.dates import parse_iso_datetime


def test_parse_iso_datetime_handles_z_offsets_and_naive_values() -> None:
    assert parse_iso_datetime("2025-03-07T18:00:00Z") == datetime(2025, 3, 7, 18, tzinfo=UTC)
    assert parse_iso_datetime("2025-03-07T18:00-05:00") == datetime(
        2025, 3, 7, 18, tzinfo=timezone(timedelta(hours=-5))
    )
    assert parse_iso_datetime("2025-03-07") == datetime(2025, 3, 7, tzinfo=UTC)


def test_parse_iso_datetime_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_iso_datetime("next friday")
    with pytest.raises(ValueError):
        parse_iso_datetime("  ")
