"""
Market Data

Per-token price, volume and market cap records merged from several
providers. The aggregator lives in ``.aggregator``.
"""

from .errors import InvalidRequest, ProviderUnavailable
from .formatting import format_market_cap
from .models import MarketDataBatch, PriceIndexQuote, TokenMarketRecord

__all__ = [
    "InvalidRequest",
    "MarketDataBatch",
    "PriceIndexQuote",
    "ProviderUnavailable",
    "TokenMarketRecord",
    "format_market_cap",
]
