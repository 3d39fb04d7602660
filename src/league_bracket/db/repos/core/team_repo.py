from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from league_bracket.db.models.core.team import Team
from league_bracket.db.repos.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session=session, model=Team)

    async def find_logo_by_name(self, name: str) -> str | None:
        # Same franchise can appear once per season; prefer a row that has artwork.
        team = await self.first_where(
            func.lower(Team.name) == name.strip().lower(),
            Team.logo_url.is_not(None),
            order_by=Team.id.desc(),
        )
        if team is None:
            return None
        return team.logo_url
