"""
Market Data Models

Per-token market record returned by the aggregator. Optional metrics are
absent (omitted from ``to_dict``) when no source supplied them; absence is
"no data", never zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ...core.chain_types import ChainId


@dataclass
class PriceIndexQuote:
    """Raw values from the general price-index provider for one token."""
    price_usd: Optional[float] = None
    market_cap: Optional[float] = None
    total_volume: Optional[float] = None
    price_change_percentage_24h: Optional[float] = None


@dataclass
class TokenMarketRecord:
    address: str
    volume_usd_24h: float = 0.0
    liquidity_usd: Optional[float] = None
    market_cap: Optional[float] = None
    market_cap_display: Optional[str] = None
    price_change_pct_24h: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "address": self.address,
            "volumeUSD": self.volume_usd_24h,
        }
        if self.liquidity_usd is not None:
            data["tvlUSD"] = self.liquidity_usd
        if self.market_cap is not None:
            data["marketCap"] = self.market_cap
        if self.market_cap_display is not None:
            data["marketCapFormatted"] = self.market_cap_display
        if self.price_change_pct_24h is not None:
            data["priceChange24h"] = self.price_change_pct_24h
        return data


@dataclass
class MarketDataBatch:
    chain_id: ChainId
    tokens: List[TokenMarketRecord] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "chainId": self.chain_id,
            "tokens": [token.to_dict() for token in self.tokens],
        }
        if self.error is not None:
            data["error"] = self.error
        return data
