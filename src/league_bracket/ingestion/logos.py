from __future__ import annotations

import logging

from league_bracket.ingestion.collaborators import TeamCatalog
from league_bracket.ingestion.outcome import Outcome

logger = logging.getLogger(__name__)


async def resolve_logo(catalog: TeamCatalog, name: str) -> Outcome[str | None]:
    """Logo of the catalog team named `name` (case-insensitive).

    A team that is missing, or has no logo, is a normal `ok(None)`; only a
    failing catalog query produces a failed outcome.
    """

    try:
        logo_url = await catalog.find_logo_by_name(name)
    except Exception as e:
        return Outcome.failed(e)

    if logo_url is None:
        logger.debug("No team logo found for %r", name)
    return Outcome.ok(logo_url)
