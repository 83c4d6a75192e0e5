from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from altseason.core.leaderboard import rank_sectors
from altseason.deps import get_market_client
from altseason.schemas import ErrorOut, SectorEntry
from altseason.services.coingecko import CoinGeckoClient

log = logging.getLogger("routers.sectors")

router = APIRouter(prefix="/api", tags=["sectors"])

@router.get(
    "/sector-leaderboard",
    response_model=list[SectorEntry],
    responses={500: {"model": ErrorOut}},
)
async def sector_leaderboard(client: CoinGeckoClient = Depends(get_market_client)):
    try:
        categories = await client.fetch_categories()
    except Exception as e:
        log.exception("Failed to fetch sector categories: %s", e)
        return JSONResponse(status_code=500, content={"error": str(e)})
    return rank_sectors(categories)
