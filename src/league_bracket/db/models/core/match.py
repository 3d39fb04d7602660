from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import JSON, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from league_bracket.db.base import Base, TimestampMixin
from league_bracket.db.enums import MatchPhaseEnum, MatchStatusEnum, RegionEnum


class Match(Base, TimestampMixin):
    __tablename__ = "matches"

    id: Mapped[int] = mapped_column(primary_key=True)

    season_id: Mapped[int] = mapped_column(
        ForeignKey("seasons.id", ondelete="CASCADE"), nullable=False
    )

    match_number: Mapped[str] = mapped_column(String, nullable=False)  # "Round 1 - Match 3"
    status: Mapped[MatchStatusEnum] = mapped_column(
        sa.Enum(
            MatchStatusEnum,
            name="matchstatusenum",
            values_callable=lambda enum_cls: [e.value for e in enum_cls],
        ),
        nullable=False,
        default=MatchStatusEnum.SCHEDULED,
    )
    round: Mapped[str] = mapped_column(String, nullable=False)  # "Round 1"
    phase: Mapped[MatchPhaseEnum] = mapped_column(
        sa.Enum(
            MatchPhaseEnum,
            name="matchphaseenum",
            values_callable=lambda enum_cls: [e.value for e in enum_cls],
        ),
        nullable=False,
        default=MatchPhaseEnum.QUALIFIERS,
    )
    region: Mapped[RegionEnum] = mapped_column(
        sa.Enum(
            RegionEnum,
            name="regionenum",
            values_callable=lambda enum_cls: [e.value for e in enum_cls],
        ),
        nullable=False,
        default=RegionEnum.NA,
    )

    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # Sets won per side.
    team1_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    team2_score: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Raw set scores, e.g. "25-20".
    set1_score: Mapped[str | None] = mapped_column(String, nullable=True)
    set2_score: Mapped[str | None] = mapped_column(String, nullable=True)
    set3_score: Mapped[str | None] = mapped_column(String, nullable=True)
    set4_score: Mapped[str | None] = mapped_column(String, nullable=True)
    set5_score: Mapped[str | None] = mapped_column(String, nullable=True)

    # Traceability back to the bracket. Not unique: re-imports create new rows.
    challonge_match_id: Mapped[str | None] = mapped_column(String, nullable=True)
    challonge_tournament_id: Mapped[str | None] = mapped_column(String, nullable=True)
    challonge_round: Mapped[int | None] = mapped_column(Integer, nullable=True)

    team1_name: Mapped[str | None] = mapped_column(String, nullable=True)
    team2_name: Mapped[str | None] = mapped_column(String, nullable=True)
    team1_logo_url: Mapped[str | None] = mapped_column(String, nullable=True)
    team2_logo_url: Mapped[str | None] = mapped_column(String, nullable=True)

    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    season: Mapped[Season] = relationship(back_populates="matches")

    __table_args__ = (
        Index("ix_matches_season_date", "season_id", "date"),
        Index("ix_matches_challonge_tournament", "challonge_tournament_id"),
    )


from league_bracket.db.models.core.season import Season  # noqa: E402
