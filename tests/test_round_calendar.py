from __future__ import annotations

from collections import Counter
from datetime import UTC, datetime, timedelta, timezone

from league_bracket.ingestion.round_calendar import (
    matches_per_window_day,
    round_window_start,
    schedule_match_date,
)

# Monday
ROUND_START = datetime(2025, 3, 3, 18, 0, tzinfo=UTC)
ROUND_END = datetime(2025, 3, 10, 0, 0, tzinfo=UTC)
SPACING = timedelta(minutes=30)


def _dates(total: int, *, completed: bool = True, round_number: int = 1) -> list[datetime]:
    return [
        schedule_match_date(
            round_number=round_number,
            round_start=ROUND_START,
            round_end=ROUND_END,
            match_index=i,
            total_matches_in_round=total,
            spacing=SPACING,
            is_completed=completed,
        )
        for i in range(total)
    ]


def test_window_starts_on_first_friday_after_round_base() -> None:
    assert round_window_start(1, ROUND_START) == datetime(2025, 3, 7, tzinfo=UTC)
    assert round_window_start(2, ROUND_START) == datetime(2025, 3, 14, tzinfo=UTC)


def test_window_starts_on_saturday_when_round_base_is_saturday() -> None:
    saturday = datetime(2025, 3, 8, 9, 0, tzinfo=UTC)
    assert round_window_start(1, saturday) == datetime(2025, 3, 8, tzinfo=UTC)


def test_six_matches_spread_two_per_day() -> None:
    per_day = Counter(d.date() for d in _dates(6))
    assert per_day == {
        datetime(2025, 3, 7).date(): 2,
        datetime(2025, 3, 8).date(): 2,
        datetime(2025, 3, 9).date(): 2,
    }


def test_seven_matches_give_the_extra_to_friday() -> None:
    assert matches_per_window_day(7) == [3, 2, 2]
    assert matches_per_window_day(8) == [3, 3, 2]

    days = [d.weekday() for d in _dates(7)]
    assert days == [4, 4, 4, 5, 5, 6, 6]


def test_completed_matches_have_no_time_of_day() -> None:
    for d in _dates(5):
        assert (d.hour, d.minute, d.second, d.microsecond) == (0, 0, 0, 0)


def test_scheduled_matches_are_spaced_from_half_past_midnight() -> None:
    dates = _dates(6, completed=False)
    assert dates[0] == datetime(2025, 3, 7, 0, 30, tzinfo=UTC)
    assert dates[1] == datetime(2025, 3, 7, 1, 0, tzinfo=UTC)
    assert dates[2] == datetime(2025, 3, 8, 0, 30, tzinfo=UTC)
    for d in dates:
        midnight = d.replace(hour=0, minute=0)
        assert d - midnight >= timedelta(minutes=30)
        assert d < ROUND_END


def test_scheduled_match_is_capped_an_hour_before_round_end() -> None:
    round_end = datetime(2025, 3, 7, 2, 0, tzinfo=UTC)
    d = schedule_match_date(
        round_number=1,
        round_start=ROUND_START,
        round_end=round_end,
        match_index=1,
        total_matches_in_round=6,
        spacing=timedelta(minutes=120),
        is_completed=False,
    )
    assert d == datetime(2025, 3, 7, 1, 0, tzinfo=UTC)
    assert d < round_end


def test_scheduled_match_never_spills_past_its_window_day() -> None:
    d = schedule_match_date(
        round_number=1,
        round_start=ROUND_START,
        round_end=datetime(2025, 4, 1, tzinfo=UTC),
        match_index=9,
        total_matches_in_round=30,
        spacing=timedelta(hours=3),
        is_completed=False,
    )
    assert d == datetime(2025, 3, 8, 0, 0, tzinfo=UTC)


def test_schedule_is_deterministic_and_keeps_timezone() -> None:
    eastern = timezone(timedelta(hours=-5))
    start = datetime(2025, 3, 3, 12, 0, tzinfo=eastern)
    args = dict(
        round_number=2,
        round_start=start,
        round_end=start + timedelta(days=14),
        match_index=4,
        total_matches_in_round=7,
        spacing=timedelta(minutes=45),
        is_completed=False,
    )
    first = schedule_match_date(**args)
    assert first == schedule_match_date(**args)
    # index 4 of 7 -> Saturday, second slot
    assert first == datetime(2025, 3, 15, 1, 15, tzinfo=eastern)


def test_index_beyond_total_stacks_on_last_day() -> None:
    d = schedule_match_date(
        round_number=1,
        round_start=ROUND_START,
        round_end=ROUND_END,
        match_index=3,
        total_matches_in_round=3,
        spacing=SPACING,
        is_completed=False,
    )
    assert d == datetime(2025, 3, 9, 1, 0, tzinfo=UTC)
