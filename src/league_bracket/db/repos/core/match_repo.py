from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from league_bracket.db.models.core.match import Match
from league_bracket.db.repos.base import BaseRepository
from league_bracket.ingestion.collaborators import NewMatch


class MatchRepository(BaseRepository[Match]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session=session, model=Match)

    async def create_match(self, new: NewMatch) -> Match:
        """Insert and commit one match so earlier rows survive a later failure."""

        sets = list(new.set_scores) + [None] * (5 - len(new.set_scores))
        match = await self.add(
            Match(
                season_id=new.season_id,
                match_number=new.match_number,
                status=new.status,
                round=new.round,
                phase=new.phase,
                region=new.region,
                date=new.date,
                team1_score=new.team1_score,
                team2_score=new.team2_score,
                set1_score=sets[0],
                set2_score=sets[1],
                set3_score=sets[2],
                set4_score=sets[3],
                set5_score=sets[4],
                challonge_match_id=new.challonge_match_id,
                challonge_tournament_id=new.challonge_tournament_id,
                challonge_round=new.challonge_round,
                team1_name=new.team1_name,
                team2_name=new.team2_name,
                team1_logo_url=new.team1_logo_url,
                team2_logo_url=new.team2_logo_url,
                tags=list(new.tags),
            ),
            flush=True,
        )
        await self.commit()
        return match

    async def list_for_tournament(self, challonge_tournament_id: str) -> list[Match]:
        return await self.list_where(Match.challonge_tournament_id == challonge_tournament_id)
