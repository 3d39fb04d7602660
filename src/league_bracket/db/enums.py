from __future__ import annotations

from enum import StrEnum


class MatchStatusEnum(StrEnum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"


class MatchPhaseEnum(StrEnum):
    QUALIFIERS = "qualifiers"
    PLAYOFFS = "playoffs"


class RegionEnum(StrEnum):
    NA = "na"
    EU = "eu"
    AS = "as"
    SA = "sa"
