from __future__ import annotations


class TournamentImportError(RuntimeError):
    """Base exception for import failures that abort the whole import."""


class SeasonNotFoundError(TournamentImportError):
    def __init__(self, season_id: int) -> None:
        super().__init__(f"Season not found: id={season_id}")
        self.season_id = season_id


class InvalidTournamentReferenceError(TournamentImportError):
    def __init__(self, reference: str) -> None:
        super().__init__(f"Invalid Challonge tournament reference: {reference!r}")
        self.reference = reference
