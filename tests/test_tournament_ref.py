from __future__ import annotations

import pytest

from league_bracket.ingestion.errors import InvalidTournamentReferenceError
from league_bracket.ingestion.providers.challonge.tournament_ref import extract_tournament_id


@pytest.mark.parametrize(
    ("reference", "expected"),
    [
        ("rvl_s3", "rvl_s3"),
        ("  rvl-s3  ", "rvl-s3"),
        ("https://challonge.com/rvl_s3", "rvl_s3"),
        ("http://challonge.com/rvl_s3/", "rvl_s3"),
        ("challonge.com/rvl_s3", "rvl_s3"),
        ("https://challonge.com/someuser/rvl_s3", "rvl_s3"),
        ("https://challonge.com/de/rvl_s3?tab=bracket", "rvl_s3"),
        ("https://www.challonge.com/rvl_s3", "rvl_s3"),
        ("https://rvl.challonge.com/s3_qualifiers", "rvl-s3_qualifiers"),
    ],
)
def test_extract_tournament_id(reference: str, expected: str) -> None:
    assert extract_tournament_id(reference) == expected


@pytest.mark.parametrize(
    "reference",
    [
        "",
        "not a tournament",
        "https://challonge.com/",
        "https://challonge.com/a/b/c",
        "https:///rvl_s3",
    ],
)
def test_extract_tournament_id_rejects_garbage(reference: str) -> None:
    with pytest.raises(InvalidTournamentReferenceError):
        extract_tournament_id(reference)
