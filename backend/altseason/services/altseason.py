from __future__ import annotations

import logging

from altseason.schemas import AltseasonIndexSnapshot

log = logging.getLogger("services.altseason")

# There is no upstream for this yet; the value is a placeholder the frontend relies on.
ALTSEASON_INDEX_STUB = 72.0

async def fetch_altseason_index() -> AltseasonIndexSnapshot:
    """
    Return the current altseason index.

    Async so it can sit next to real upstream lookups in asyncio.gather.
    """
    return AltseasonIndexSnapshot(altseason_index=ALTSEASON_INDEX_STUB)
