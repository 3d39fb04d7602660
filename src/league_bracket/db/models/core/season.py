from __future__ import annotations

from datetime import date

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from league_bracket.db.base import Base, TimestampMixin


class Season(Base, TimestampMixin):
    __tablename__ = "seasons"

    id: Mapped[int] = mapped_column(primary_key=True)

    season_number: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str | None] = mapped_column(String, nullable=True)

    start_date: Mapped[date] = mapped_column(nullable=False)
    end_date: Mapped[date | None] = mapped_column(nullable=True)

    teams: Mapped[list[Team]] = relationship(back_populates="season")
    matches: Mapped[list[Match]] = relationship(back_populates="season")


from league_bracket.db.models.core.match import Match  # noqa: E402
from league_bracket.db.models.core.team import Team  # noqa: E402
