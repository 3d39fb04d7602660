from league_bracket.db.models.core.match import Match
from league_bracket.db.models.core.season import Season
from league_bracket.db.models.core.team import Team

__all__ = [
    "Match",
    "Season",
    "Team",
]
