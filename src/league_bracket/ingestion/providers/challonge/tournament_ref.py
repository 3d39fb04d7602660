from __future__ import annotations

import re
from urllib.parse import urlsplit

from league_bracket.ingestion.errors import InvalidTournamentReferenceError

_bare_id_re = re.compile(r"^[A-Za-z0-9_-]+$")
_host_re = re.compile(r"^(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,}(?::\d+)?$")

CHALLONGE_DOMAIN = "challonge.com"


def extract_tournament_id(reference: str) -> str:
    """
    Return the Challonge API tournament id for a bare id or a tournament URL.

    Accepted shapes:
      - "summer_cup"
      - "https://challonge.com/summer_cup"
      - "challonge.com/<user-or-language>/summer_cup"
      - "https://league.challonge.com/summer_cup" -> "league-summer_cup"
    """
    ref = (reference or "").strip()
    if _bare_id_re.match(ref):
        return ref

    split = urlsplit(ref if "://" in ref else f"https://{ref}")
    host = (split.hostname or "").lower()
    if not host or not _host_re.match(split.netloc):
        raise InvalidTournamentReferenceError(reference)

    segments = [s for s in split.path.split("/") if s]
    if not 1 <= len(segments) <= 2 or not _bare_id_re.match(segments[-1]):
        raise InvalidTournamentReferenceError(reference)

    slug = segments[-1]

    # Organization-hosted tournaments are addressed as "<subdomain>-<slug>" by the API.
    if host.endswith("." + CHALLONGE_DOMAIN):
        subdomain = host[: -len(CHALLONGE_DOMAIN) - 1]
        if subdomain and subdomain != "www":
            return f"{subdomain}-{slug}"

    return slug
