"""
Market-Data Aggregator

Builds one TokenMarketRecord per requested address by querying several
providers concurrently and merging their answers field by field:

- Liquidity: venue-specific liquidity source only
- Market cap: venue display string first, else the price index's number
- 24h volume: price index, 0 when missing
- 24h change: price index, else the equity quote of the underlying ticker
  for tokens the equity predicate accepts

Every provider call is bounded by a per-provider semaphore and an individual
timeout. A failing provider leaves its fields absent for that token only.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, TypeVar

from ...config import settings
from ...core.chain_types import ChainId
from ...providers.base import (
    LiquidityProvider,
    MarketCapDisplayProvider,
    MarketQuoteProvider,
    PriceIndexProvider,
    Provider,
)
from ..token_catalog import get_token_catalog
from .errors import InvalidRequest, ProviderUnavailable
from .models import MarketDataBatch, PriceIndexQuote, TokenMarketRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

EquityPredicate = Callable[[str], bool]
TickerResolver = Callable[[str], Optional[str]]


def validate_addresses(addresses: Any) -> List[str]:
    """Reject empty batches and non-string or blank entries."""
    if not isinstance(addresses, (list, tuple)) or len(addresses) == 0:
        raise InvalidRequest("Invalid addresses. Must be a non-empty array of token addresses.")
    if not all(isinstance(addr, str) and addr.strip() for addr in addresses):
        raise InvalidRequest("All addresses must be non-empty strings.")
    return list(addresses)


def _is_finite(value: Optional[float]) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _valid_amount(value: Optional[float]) -> bool:
    """Finite and non-negative; anything else from a provider counts as absent."""
    return _is_finite(value) and value >= 0


class MarketDataAggregator:
    """
    Best-effort market data for a batch of token addresses.

    Usage:
        aggregator = MarketDataAggregator(price_index=CoingeckoProvider(), ...)
        batch = await aggregator.aggregate(101, ["So111...", "EPjF..."])
    """

    def __init__(
        self,
        *,
        price_index: PriceIndexProvider,
        liquidity: LiquidityProvider,
        market_cap_display: MarketCapDisplayProvider,
        quotes: MarketQuoteProvider,
        is_tradable_equity: Optional[EquityPredicate] = None,
        ticker_for: Optional[TickerResolver] = None,
        timeout_s: Optional[float] = None,
        max_concurrency: Optional[int] = None,
    ) -> None:
        catalog = get_token_catalog()
        self.price_index = price_index
        self.liquidity = liquidity
        self.market_cap_display = market_cap_display
        self.quotes = quotes
        self.is_tradable_equity = is_tradable_equity or catalog.is_tradable_equity
        self.ticker_for = ticker_for or catalog.ticker_for
        self.timeout_s = timeout_s if timeout_s is not None else settings.provider_timeout_seconds
        limit = max_concurrency or settings.provider_max_concurrency
        # One limiter per provider instance; a provider serving two roles shares it
        self._limits: Dict[int, asyncio.Semaphore] = {}
        for provider in (price_index, liquidity, market_cap_display, quotes):
            self._limits.setdefault(id(provider), asyncio.Semaphore(limit))

    async def aggregate(self, chain_id: ChainId, addresses: Sequence[str]) -> MarketDataBatch:
        """Fetch records for all addresses; output order matches input order."""
        validated = validate_addresses(addresses)
        tokens = await asyncio.gather(
            *(self._build_record(chain_id, address) for address in validated)
        )
        return MarketDataBatch(chain_id=chain_id, tokens=list(tokens))

    async def _build_record(self, chain_id: ChainId, address: str) -> TokenMarketRecord:
        try:
            liquidity, cap_display, quote = await asyncio.gather(
                self._call(self.liquidity, self.liquidity.get_liquidity, chain_id, address),
                self._call(
                    self.market_cap_display,
                    self.market_cap_display.get_market_cap_display,
                    chain_id,
                    address,
                ),
                self._call(self.price_index, self.price_index.get_token_market_data, chain_id, address),
            )
            quote = quote or PriceIndexQuote()

            volume = quote.total_volume if _valid_amount(quote.total_volume) else 0.0
            record = TokenMarketRecord(address=address, volume_usd_24h=volume)

            if _valid_amount(liquidity) and liquidity > 0:
                record.liquidity_usd = liquidity

            if cap_display:
                record.market_cap_display = cap_display
            elif _valid_amount(quote.market_cap) and quote.market_cap > 0:
                record.market_cap = quote.market_cap

            change = quote.price_change_percentage_24h
            if not _is_finite(change):
                change = await self._equity_price_change(address)
            if _is_finite(change):
                record.price_change_pct_24h = change

            return record
        except Exception:
            logger.exception("Error fetching market data for token %s on chain %s", address, chain_id)
            return TokenMarketRecord(address=address)

    async def _equity_price_change(self, address: str) -> Optional[float]:
        try:
            if not self.is_tradable_equity(address):
                return None
            ticker = self.ticker_for(address)
        except Exception as exc:
            logger.debug("Failed to check token metadata for %s: %s", address, exc)
            return None
        if not ticker:
            return None

        try:
            return await self._guarded(self.quotes, self.quotes.get_price_change_pct, ticker)
        except ProviderUnavailable as exc:
            logger.debug("Failed to fetch quote price change for %s (%s): %s", address, ticker, exc)
            return None

    async def _call(
        self,
        provider: Provider,
        method: Callable[..., Awaitable[T]],
        *args: Any,
    ) -> Optional[T]:
        """Run a provider lookup; any failure becomes absent data."""
        try:
            return await self._guarded(provider, method, *args)
        except ProviderUnavailable as exc:
            log = logger.error if isinstance(provider, PriceIndexProvider) else logger.warning
            log("Provider %s failed for %s: %s", exc.provider, args[-1], exc.reason)
            return None

    async def _guarded(
        self,
        provider: Provider,
        method: Callable[..., Awaitable[T]],
        *args: Any,
    ) -> Optional[T]:
        name = getattr(provider, "name", type(provider).__name__)
        async with self._limits[id(provider)]:
            try:
                return await asyncio.wait_for(method(*args), timeout=self.timeout_s)
            except ProviderUnavailable:
                raise
            except asyncio.TimeoutError as exc:
                raise ProviderUnavailable(name, f"timed out after {self.timeout_s}s") from exc
            except Exception as exc:
                raise ProviderUnavailable(name, str(exc) or type(exc).__name__) from exc


_aggregator: Optional[MarketDataAggregator] = None


def get_market_data_aggregator() -> MarketDataAggregator:
    """Process-wide aggregator wired to the configured providers."""
    global _aggregator
    if _aggregator is None:
        from ...providers.coingecko import CoingeckoProvider
        from ...providers.jupiter import JupiterProvider
        from ...providers.yahoo import YahooQuoteProvider

        jupiter = JupiterProvider()
        _aggregator = MarketDataAggregator(
            price_index=CoingeckoProvider(),
            liquidity=jupiter,
            market_cap_display=jupiter,
            quotes=YahooQuoteProvider(),
        )
    return _aggregator
