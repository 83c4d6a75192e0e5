from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from altseason.deps import get_market_client
from altseason.schemas import AltseasonIndexSnapshot, ErrorOut, GlobalMarketSnapshot
from altseason.services.altseason import fetch_altseason_index
from altseason.services.coingecko import CoinGeckoClient

log = logging.getLogger("routers.metrics")

router = APIRouter(prefix="/api/metrics", tags=["metrics"])

@router.get(
    "/btc-dominance",
    response_model=GlobalMarketSnapshot,
    responses={500: {"model": ErrorOut}},
)
async def btc_dominance(client: CoinGeckoClient = Depends(get_market_client)):
    try:
        return await client.fetch_btc_dominance()
    except Exception as e:
        log.exception("Failed to fetch BTC dominance: %s", e)
        return JSONResponse(status_code=500, content={"error": str(e)})

@router.get("/altseason-index", response_model=AltseasonIndexSnapshot)
async def altseason_index():
    return await fetch_altseason_index()
