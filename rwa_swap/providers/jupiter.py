"""
Jupiter market data provider for Solana.

Jupiter's token search returns per-mint liquidity and market cap. The
integration is switched off by default (``enable_jupiter_market_data``);
while off, every lookup answers ``None`` and the aggregator falls back to
the price index.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from ..core.chain_types import ChainId, is_solana_chain
from ..services.market_data.errors import ProviderUnavailable
from ..services.market_data.formatting import format_market_cap
from .base import LiquidityProvider, MarketCapDisplayProvider

logger = logging.getLogger(__name__)

WRAPPED_SOL_MINT = "So11111111111111111111111111111111111111112"


@dataclass
class JupiterToken:
    """Parsed Jupiter token search result."""

    address: str  # Mint address (Base58)
    symbol: str
    name: str
    decimals: int
    liquidity: Optional[float] = None
    mcap: Optional[float] = None
    usd_price: Optional[float] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "JupiterToken":
        """Parse a token from Jupiter API response."""
        return cls(
            address=data.get("id") or data.get("address", ""),
            symbol=data.get("symbol", ""),
            name=data.get("name", ""),
            decimals=data.get("decimals", 9),
            liquidity=_number(data.get("liquidity")),
            mcap=_number(data.get("mcap")),
            usd_price=_number(data.get("usdPrice")),
        )


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


class JupiterProvider(LiquidityProvider, MarketCapDisplayProvider):
    """
    Jupiter liquidity and market cap provider for Solana mints.

    No API key required. Nothing is cached; each lookup queries the API.
    """

    name = "jupiter"
    timeout_s = 10

    def __init__(self, base_url: Optional[str] = None, enabled: Optional[bool] = None) -> None:
        self.base_url = (base_url or settings.jupiter_base_url).rstrip("/")
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        if self._enabled is not None:
            return self._enabled
        return settings.enable_jupiter_market_data

    async def ready(self) -> bool:
        return self.enabled

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "disabled", "reason": "Jupiter market data disabled"}

        started = time.perf_counter()
        try:
            await self._search(WRAPPED_SOL_MINT)
        except ProviderUnavailable as exc:
            return {"status": "error", "reason": exc.reason}
        return {"status": "healthy", "latency_ms": int((time.perf_counter() - started) * 1000)}

    async def get_liquidity(self, chain_id: ChainId, address: str) -> Optional[float]:
        token = await self._lookup(chain_id, address)
        if token is None:
            return None
        return token.liquidity

    async def get_market_cap_display(self, chain_id: ChainId, address: str) -> Optional[str]:
        token = await self._lookup(chain_id, address)
        if token is None or token.mcap is None or token.mcap <= 0:
            return None
        return format_market_cap(token.mcap)

    async def _lookup(self, chain_id: ChainId, address: str) -> Optional[JupiterToken]:
        if not self.enabled or not is_solana_chain(chain_id):
            return None

        for item in await self._search(address):
            if isinstance(item, dict) and (item.get("id") or item.get("address")) == address:
                return JupiterToken.from_api(item)

        logger.debug("Jupiter has no token for mint %s", address)
        return None

    async def _search(self, query: str) -> List[Dict[str, Any]]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                resp = await client.get(
                    f"{self.base_url}/tokens/v2/search",
                    params={"query": query},
                )
                resp.raise_for_status()
                results = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise ProviderUnavailable(self.name, str(exc) or type(exc).__name__) from exc

        if not isinstance(results, list):
            raise ProviderUnavailable(self.name, "unexpected search payload")
        return results
