from __future__ import annotations
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from altseason.config import Settings
from altseason.log import setup_logging
from altseason.services.coingecko import CoinGeckoClient
from altseason.services.notifier import AlertNotifier

from altseason.routers.health import router as health_router
from altseason.routers.metrics import router as metrics_router
from altseason.routers.sectors import router as sectors_router
from altseason.routers.signals import router as signals_router

log = logging.getLogger("altseason.main")

def create_app(
    settings: Settings | None = None,
    market_client: CoinGeckoClient | None = None,
    notifier: AlertNotifier | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Runtime configuration. Read from the environment when omitted.
        market_client: Upstream client override (tests inject one with a mock transport).
        notifier: Alert notifier override.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(title="Altseason Backend", version="0.1.0")

    # Now, we allow the frontend origin to call us from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Now, we build the collaborators once and share them through app.state.
    app.state.settings = settings
    app.state.market_client = market_client or CoinGeckoClient(
        settings.coingecko_base_url,
        timeout=settings.upstream_timeout_seconds,
    )
    app.state.notifier = notifier or AlertNotifier(settings)

    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(sectors_router)
    app.include_router(signals_router)

    log.info("App created (cors origin=%s, alerts enabled=%s)", settings.frontend_url, app.state.notifier.enabled())
    return app
