from __future__ import annotations

from datetime import datetime, timedelta

# datetime.weekday(): Monday == 0
WINDOW_WEEKDAYS = frozenset({4, 5, 6})  # Fri, Sat, Sun
WINDOW_DAYS = 3

ROUND_LENGTH = timedelta(days=7)
FIRST_MATCH_OFFSET = timedelta(minutes=30)
END_OF_ROUND_MARGIN = timedelta(hours=1)


def _midnight(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def round_window_start(round_number: int, round_start: datetime) -> datetime:
    """Midnight of the first Fri/Sat/Sun on or after the round's base date.

    Round N starts (N - 1) weeks after `round_start`.
    """

    day = _midnight(round_start + (round_number - 1) * ROUND_LENGTH)
    while day.weekday() not in WINDOW_WEEKDAYS:
        day += timedelta(days=1)
    return day


def matches_per_window_day(total_matches: int) -> list[int]:
    """Split `total_matches` over the window, extras going to the earliest days."""

    total = max(total_matches, 0)
    base, extra = divmod(total, WINDOW_DAYS)
    return [base + (1 if day < extra else 0) for day in range(WINDOW_DAYS)]


def window_slot(match_index: int, total_matches: int) -> tuple[int, int]:
    """Return (window day, slot within that day) for the `match_index`-th match."""

    if total_matches <= 0:
        return 0, max(match_index, 0)

    first = 0
    sizes = matches_per_window_day(total_matches)
    for day, size in enumerate(sizes):
        if match_index < first + size:
            return day, match_index - first
        first += size

    # Index past the announced total: keep stacking on the last day.
    last_day = WINDOW_DAYS - 1
    return last_day, match_index - (total_matches - sizes[last_day])


def schedule_match_date(
    round_number: int,
    round_start: datetime,
    round_end: datetime,
    match_index: int,
    total_matches_in_round: int,
    spacing: timedelta,
    is_completed: bool,
) -> datetime:
    """
    Place one match of a round onto the round's Fri/Sat/Sun window.

    Completed matches get the window day at midnight (kickoff times of finished
    matches are not reconstructed). Scheduled matches start 30 minutes into the
    day and are `spacing` apart, never later than an hour before `round_end` nor
    past the end of their window day.

    Pure: the same arguments always give the same datetime.
    """

    day, slot = window_slot(match_index, total_matches_in_round)
    window_day = round_window_start(round_number, round_start) + timedelta(days=day)

    if is_completed:
        return window_day

    kickoff = window_day + FIRST_MATCH_OFFSET + slot * spacing
    latest = min(round_end - END_OF_ROUND_MARGIN, window_day + timedelta(days=1))
    return min(kickoff, latest)
