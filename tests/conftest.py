"""Shared fakes for market-data tests."""

import asyncio
from typing import Any, Dict, Optional

import pytest

from rwa_swap.providers.base import (
    LiquidityProvider,
    MarketCapDisplayProvider,
    MarketQuoteProvider,
    PriceIndexProvider,
)
from rwa_swap.services.market_data.aggregator import MarketDataAggregator


class _FakeProvider:
    """Answers from a per-key table; values that are exceptions are raised."""

    def __init__(self, answers: Optional[Dict[str, Any]] = None, delays: Optional[Dict[str, float]] = None):
        self.answers = answers or {}
        self.delays = delays or {}
        self.calls: list = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def ready(self) -> bool:
        return True

    async def health_check(self) -> Dict[str, Any]:
        return {"status": "healthy"}

    async def _answer(self, key: str) -> Any:
        self.calls.append(key)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(key, 0))
            value = self.answers.get(key)
            if isinstance(value, BaseException):
                raise value
            return value
        finally:
            self.in_flight -= 1


class FakePriceIndex(_FakeProvider, PriceIndexProvider):
    name = "fake_index"

    async def get_token_market_data(self, chain_id, address):
        return await self._answer(address)


class FakeLiquidity(_FakeProvider, LiquidityProvider):
    name = "fake_liquidity"

    async def get_liquidity(self, chain_id, address):
        return await self._answer(address)


class FakeMarketCapDisplay(_FakeProvider, MarketCapDisplayProvider):
    name = "fake_mcap"

    async def get_market_cap_display(self, chain_id, address):
        return await self._answer(address)


class FakeQuotes(_FakeProvider, MarketQuoteProvider):
    name = "fake_quotes"

    async def get_price_change_pct(self, ticker):
        return await self._answer(ticker)


@pytest.fixture
def price_index():
    return FakePriceIndex()


@pytest.fixture
def liquidity():
    return FakeLiquidity()


@pytest.fixture
def market_cap_display():
    return FakeMarketCapDisplay()


@pytest.fixture
def quotes():
    return FakeQuotes()


@pytest.fixture
def make_aggregator(price_index, liquidity, market_cap_display, quotes):
    def _make(**overrides) -> MarketDataAggregator:
        kwargs = dict(
            price_index=price_index,
            liquidity=liquidity,
            market_cap_display=market_cap_display,
            quotes=quotes,
            timeout_s=1.0,
            max_concurrency=5,
        )
        kwargs.update(overrides)
        return MarketDataAggregator(**kwargs)

    return _make
