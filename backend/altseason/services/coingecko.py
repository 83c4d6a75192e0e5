"""
CoinGecko API Adapter.

Read-only access to the public market-data endpoints we proxy:
- /global            -> BTC market cap dominance
- /coins/categories  -> per-sector 24h market cap change

No retries and no backoff: a failure goes straight back to the caller.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from altseason.config import COINGECKO_BASE
from altseason.schemas import CoinGeckoCategory, CoinGeckoGlobal, GlobalMarketSnapshot

log = logging.getLogger("services.coingecko")

_categories_adapter = TypeAdapter(list[CoinGeckoCategory])


class UpstreamError(Exception):
    """Base class for anything that went wrong talking to the market-data API."""


class UpstreamStatusError(UpstreamError):
    def __init__(self, status: int, status_text: str):
        self.status = status
        self.status_text = status_text
        super().__init__(f"HTTP {status} - {status_text}")


class UpstreamTransportError(UpstreamError):
    """The request never produced a response (DNS, connection reset, timeout...)."""


class MalformedResponseError(UpstreamError):
    """The response arrived but did not have the shape we expect."""


class CoinGeckoClient:
    """
    Async adapter around the CoinGecko REST API.

    Args:
        base_url: API root, without trailing slash.
        timeout: Seconds before giving up on a request. None disables the timeout.
        transport: Optional httpx transport. Tests pass an httpx.MockTransport here.
    """
    def __init__(
        self,
        base_url: str = COINGECKO_BASE,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _url(self, path_or_url: str) -> str:
        if path_or_url.startswith(("http://", "https://")):
            return path_or_url
        return f"{self.base_url}/{path_or_url.lstrip('/')}"

    async def fetch_json(self, path_or_url: str) -> Any:
        """
        GET a URL and decode the JSON body.

        Raises:
            UpstreamStatusError: the response status is not 2xx.
            UpstreamTransportError: the network call itself failed.
            MalformedResponseError: the body is not valid JSON.
        """
        url = self._url(path_or_url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(url)
        except httpx.TransportError as e:
            log.error("Transport error fetching %s: %s", url, e)
            raise UpstreamTransportError(str(e) or e.__class__.__name__) from e

        if not resp.is_success:
            log.error("Upstream %s returned HTTP %d", url, resp.status_code)
            raise UpstreamStatusError(resp.status_code, resp.reason_phrase)

        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponseError(f"Invalid JSON from {url}: {e}") from e

    async def fetch_global(self) -> CoinGeckoGlobal:
        payload = await self.fetch_json("/global")
        try:
            return CoinGeckoGlobal.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected /global payload: {e}") from e

    async def fetch_btc_dominance(self) -> GlobalMarketSnapshot:
        snapshot = await self.fetch_global()
        return GlobalMarketSnapshot(btc_dominance=snapshot.data.market_cap_percentage.btc)

    async def fetch_categories(self) -> list[CoinGeckoCategory]:
        payload = await self.fetch_json("/coins/categories")
        try:
            return _categories_adapter.validate_python(payload)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected /coins/categories payload: {e}") from e
