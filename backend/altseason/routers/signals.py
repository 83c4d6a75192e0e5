from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from altseason.core.signals import evaluate_signals
from altseason.deps import get_market_client, get_notifier
from altseason.schemas import ErrorOut, SignalResult
from altseason.services.altseason import fetch_altseason_index
from altseason.services.coingecko import CoinGeckoClient
from altseason.services.notifier import AlertNotifier

log = logging.getLogger("routers.signals")

router = APIRouter(prefix="/api/signals", tags=["signals"])

@router.get("", response_model=SignalResult, responses={500: {"model": ErrorOut}})
async def get_signals(
    client: CoinGeckoClient = Depends(get_market_client),
    notifier: AlertNotifier = Depends(get_notifier),
):
    try:
        # Now, we fetch both inputs concurrently. They fill independent fields,
        # so whichever finishes first doesn't matter.
        dominance, index = await asyncio.gather(
            client.fetch_btc_dominance(),
            fetch_altseason_index(),
        )

        btc_d = dominance.btc_dominance
        asi = index.altseason_index
        evaluation = evaluate_signals(btc_d, asi)

        # Alerts are awaited inline; the notifier never raises.
        for subject, text in evaluation.alerts:
            await notifier.send_alert(subject, text)
    except Exception as e:
        log.exception("Failed to evaluate signals: %s", e)
        return JSONResponse(status_code=500, content={"error": str(e)})

    if evaluation.alerts:
        log.info("Signals fired (btc_d=%.2f, asi=%.2f): %s", btc_d, asi, [s for s, _ in evaluation.alerts])

    return SignalResult(
        btc_dominance=btc_d,
        altseason_index=asi,
        buy_signals=evaluation.buy_signals,
        sell_signals=evaluation.sell_signals,
    )
