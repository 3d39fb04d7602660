from __future__ import annotations

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from league_bracket.db.base import Base, TimestampMixin


class Team(Base, TimestampMixin):
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(primary_key=True)

    season_id: Mapped[int | None] = mapped_column(
        ForeignKey("seasons.id", ondelete="SET NULL"), nullable=True
    )

    name: Mapped[str] = mapped_column(String, nullable=False)
    logo_url: Mapped[str | None] = mapped_column(String, nullable=True)
    placement: Mapped[str] = mapped_column(
        String, nullable=False, default="Didnt make playoffs", server_default="Didnt make playoffs"
    )

    season: Mapped[Season | None] = relationship(back_populates="teams")


from league_bracket.db.models.core.season import Season  # noqa: E402
