from __future__ import annotations

from fastapi import Request

from altseason.config import Settings
from altseason.services.coingecko import CoinGeckoClient
from altseason.services.notifier import AlertNotifier

# Collaborators are built once in create_app() and parked on app.state.
# Routers pull them through Depends so tests can swap them out.

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_market_client(request: Request) -> CoinGeckoClient:
    return request.app.state.market_client

def get_notifier(request: Request) -> AlertNotifier:
    return request.app.state.notifier
