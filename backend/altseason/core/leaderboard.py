from __future__ import annotations

from typing import Iterable

from altseason.schemas import CoinGeckoCategory, SectorEntry

LEADERBOARD_SIZE = 10

def _sort_key(entry: SectorEntry) -> float:
    # A null change ranks as 0, matching how the frontend has always seen it ordered.
    return entry.change_24h if entry.change_24h is not None else 0.0

def rank_sectors(categories: Iterable[CoinGeckoCategory], limit: int = LEADERBOARD_SIZE) -> list[SectorEntry]:
    """
    Turn CoinGecko categories into the sector leaderboard.

    Args:
        categories: Upstream category rows, in the order CoinGecko returned them.
        limit: How many sectors to keep.

    Returns:
        list[SectorEntry]: Best 24h performers first. sorted() is stable, so
                           ties keep their upstream order.
    """
    entries = [SectorEntry(sector=c.name, change_24h=c.market_cap_change_24h) for c in categories]
    return sorted(entries, key=_sort_key, reverse=True)[:limit]
