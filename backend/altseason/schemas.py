"""
Pydantic schemas for the Altseason API.
Covers both the responses we serve and the upstream CoinGecko payloads we read.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GlobalMarketSnapshot(BaseModel):
    btc_dominance: float


class AltseasonIndexSnapshot(BaseModel):
    altseason_index: float


class SectorEntry(BaseModel):
    """
    One row of the sector leaderboard.
    CoinGecko reports a null 24h change for some young categories, so it stays optional.
    """
    sector: str
    change_24h: float | None


class SignalResult(BaseModel):
    """
    Response of /api/signals.
    Both inputs are echoed back so the frontend can show why a signal did (or did not) fire.
    """
    btc_dominance: float
    altseason_index: float
    buy_signals: list[str]
    sell_signals: list[str]


class ErrorOut(BaseModel):
    error: str


# Upstream payloads.
# We only declare the fields we read; everything else CoinGecko sends is ignored.

class MarketCapPercentage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    btc: float


class GlobalData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    market_cap_percentage: MarketCapPercentage


class CoinGeckoGlobal(BaseModel):
    """Shape of GET /global."""
    model_config = ConfigDict(extra="ignore")

    data: GlobalData


class CoinGeckoCategory(BaseModel):
    """One element of GET /coins/categories."""
    model_config = ConfigDict(extra="ignore")

    name: str
    market_cap_change_24h: float | None = None
