from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from league_bracket.db.models.core.season import Season
from league_bracket.db.repos.base import BaseRepository


class SeasonRepository(BaseRepository[Season]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session=session, model=Season)

    async def get_season(self, season_id: int) -> Season | None:
        return await self.get(season_id)
