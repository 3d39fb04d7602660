from __future__ import annotations

import pytest

from league_bracket.ingestion.scores import (
    SetAggregate,
    aggregate_set_scores,
    parse_set_scores,
    stored_set_scores,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", SetAggregate(0, 0)),
        ("25-20", SetAggregate(1, 0)),
        ("20-25,25-20", SetAggregate(1, 1)),
        ("25-25", SetAggregate(0, 0)),
        ("abc-20", SetAggregate(0, 0)),
        ("25-20,20-25,25-22", SetAggregate(2, 1)),
        ("25-20-3,15", SetAggregate(0, 0)),
    ],
)
def test_aggregate_set_scores(raw: str, expected: SetAggregate) -> None:
    assert aggregate_set_scores(parse_set_scores(raw)) == expected


def test_parse_set_scores_trims_and_drops_empty_sets() -> None:
    assert parse_set_scores(" 25-20 , ,20-25,") == ("25-20", "20-25")
    assert parse_set_scores(None) == ()


def test_aggregate_never_exceeds_number_of_sets() -> None:
    raw = "25-20,x-y,25-25,15-25,30-28"
    sets = parse_set_scores(raw)
    agg = aggregate_set_scores(sets)
    assert agg.side_a + agg.side_b <= len(raw.split(","))
    assert agg == SetAggregate(2, 1)


def test_stored_set_scores_pads_to_five_columns() -> None:
    assert stored_set_scores(("25-20", "20-25")) == ("25-20", "20-25", None, None, None)
    six = tuple(f"25-{i}" for i in range(6))
    assert stored_set_scores(six) == six[:5]
