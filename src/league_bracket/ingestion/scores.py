from __future__ import annotations

from dataclasses import dataclass

MAX_STORED_SETS = 5

SetScores = tuple[str, ...]


@dataclass(frozen=True)
class SetAggregate:
    """Sets won per side."""

    side_a: int = 0
    side_b: int = 0


def parse_set_scores(raw: str | None) -> SetScores:
    """Split a Challonge `scores_csv` value ("25-20,20-25,25-22") into per-set strings.

    Numeric format is not checked here; see `aggregate_set_scores`.
    """

    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _parse_set(value: str) -> tuple[int, int] | None:
    parts = value.split("-")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def aggregate_set_scores(sets: SetScores) -> SetAggregate:
    """Count sets won by each side.

    Malformed sets and tied sets count for nobody; this never raises.
    """

    side_a = 0
    side_b = 0
    for value in sets:
        if not value:
            continue
        parsed = _parse_set(value)
        if parsed is None:
            continue
        a, b = parsed
        if a > b:
            side_a += 1
        elif b > a:
            side_b += 1
    return SetAggregate(side_a=side_a, side_b=side_b)


def stored_set_scores(sets: SetScores) -> tuple[str | None, ...]:
    """First five sets padded with None, matching the set1..set5 columns."""

    head = list(sets[:MAX_STORED_SETS])
    return tuple(head) + (None,) * (MAX_STORED_SETS - len(head))
