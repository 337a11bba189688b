import asyncio
import logging
import math
import time
from typing import Any, Dict, Optional

import httpx

from ..config import settings
from ..core.chain_types import ChainId, coingecko_platform_for_chain, normalize_address
from ..services.market_data.errors import ProviderUnavailable
from ..services.market_data.models import PriceIndexQuote
from .base import PriceIndexProvider

logger = logging.getLogger(__name__)


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None
    return None


class CoingeckoProvider(PriceIndexProvider):
    """Coingecko API provider for token market data"""

    name = "coingecko"
    timeout_s = 15

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.api_key = settings.coingecko_api_key if api_key is None else api_key
        self.base_url = (base_url or settings.coingecko_base_url).rstrip("/")

    def _build_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["X-CG-Demo-API-Key"] = self.api_key
        return headers

    async def ready(self) -> bool:
        return settings.enable_coingecko  # API key is optional for basic tier

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {
                "status": "unavailable",
                "reason": "Provider disabled"
            }

        started = time.perf_counter()
        try:
            await self._get_json("/ping", {})
        except ProviderUnavailable as exc:
            return {"status": "error", "reason": exc.reason}
        return {"status": "healthy", "latency_ms": int((time.perf_counter() - started) * 1000)}

    async def get_token_market_data(self, chain_id: ChainId, address: str) -> Optional[PriceIndexQuote]:
        """Get price, market cap, 24h volume and 24h change for one contract address"""
        if not await self.ready():
            return None

        platform = coingecko_platform_for_chain(chain_id)
        if platform is None:
            logger.debug("No Coingecko platform for chain %s", chain_id)
            return None

        params = {
            "contract_addresses": address,
            "vs_currencies": "usd",
            "include_market_cap": "true",
            "include_24hr_vol": "true",
            "include_24hr_change": "true",
        }

        data = await self._get_json(f"/simple/token_price/{platform}", params)
        if not isinstance(data, dict):
            raise ProviderUnavailable(self.name, "unexpected token_price payload")

        # EVM keys come back lowercased; Solana mints keep their case
        entry = data.get(address)
        if entry is None:
            wanted = normalize_address(address)
            entry = next(
                (value for key, value in data.items() if normalize_address(key) == wanted),
                None,
            )
        if not entry:
            return None
        if not isinstance(entry, dict):
            raise ProviderUnavailable(self.name, f"unexpected entry for {address}")

        return PriceIndexQuote(
            price_usd=_as_float(entry.get("usd")),
            market_cap=_as_float(entry.get("usd_market_cap")),
            total_volume=_as_float(entry.get("usd_24h_vol")),
            price_change_percentage_24h=_as_float(entry.get("usd_24h_change")),
        )

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        async with httpx.AsyncClient() as client:
            for attempt in range(2):
                try:
                    resp = await client.get(
                        f"{self.base_url}{path}",
                        headers=self._build_headers(),
                        params=params,
                        timeout=self.timeout_s,
                    )
                    if resp.status_code == 404:
                        return {}
                    resp.raise_for_status()
                    return resp.json()
                except httpx.HTTPStatusError as exc:
                    if exc.response.status_code == 429 and attempt == 0:
                        await asyncio.sleep(1)
                        continue
                    raise ProviderUnavailable(
                        self.name, f"HTTP {exc.response.status_code}"
                    ) from exc
                except (httpx.HTTPError, ValueError) as exc:
                    raise ProviderUnavailable(self.name, str(exc) or type(exc).__name__) from exc
        return {}
