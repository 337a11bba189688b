"""
Yahoo Finance quotes via yfinance.

Used only to fill the 24h price change of tokenized stocks when the price
index has none. yfinance is blocking, so lookups run in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Dict, Optional

import yfinance as yf

from ..config import settings
from .base import MarketQuoteProvider

logger = logging.getLogger(__name__)

CHANGE_PERCENT_KEYS = ("regularMarketChangePercent", "changePercent")


def _fetch_info(ticker: str) -> Dict[str, Any]:
    return yf.Ticker(ticker).info or {}


class YahooQuoteProvider(MarketQuoteProvider):
    """Daily change percentage for exchange-listed tickers"""

    name = "market_quotes"
    timeout_s = 10

    def __init__(self, enabled: Optional[bool] = None) -> None:
        self._enabled = enabled

    async def ready(self) -> bool:
        if self._enabled is not None:
            return self._enabled
        return settings.enable_market_quotes

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "disabled", "reason": "Market quotes fallback disabled"}
        return {"status": "healthy"}

    async def get_price_change_pct(self, ticker: str) -> Optional[float]:
        if not ticker or not await self.ready():
            return None

        info = await asyncio.to_thread(_fetch_info, ticker)
        for key in CHANGE_PERCENT_KEYS:
            value = info.get(key)
            if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
                return float(value)

        logger.debug("No change percentage in quote for %s", ticker)
        return None
