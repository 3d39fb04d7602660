from __future__ import annotations

from datetime import UTC, datetime


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into a tz-aware datetime.

    Supports:
      - "2025-03-07T18:00:00Z" / "+00:00" / "-05:00"
      - "2025-03-07T18:00" and "2025-03-07" (treated as UTC)
    """
    v = value.strip()
    if not v:
        raise ValueError("Empty datetime value")
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    dt = datetime.fromisoformat(v)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt
