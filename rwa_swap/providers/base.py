from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..core.chain_types import ChainId
from ..services.market_data.models import PriceIndexQuote


class Provider(ABC):
    """Base provider interface"""

    name: str
    timeout_s: float = 10

    @abstractmethod
    async def ready(self) -> bool:
        """Check if provider is ready to serve requests"""
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Return provider health status"""
        pass


class PriceIndexProvider(Provider):
    """General price index: volume, market cap and 24h change by contract address"""

    @abstractmethod
    async def get_token_market_data(self, chain_id: ChainId, address: str) -> Optional[PriceIndexQuote]:
        """Return market data for a token, or None if the index does not list it"""
        pass


class LiquidityProvider(Provider):
    """Venue-specific liquidity source"""

    @abstractmethod
    async def get_liquidity(self, chain_id: ChainId, address: str) -> Optional[float]:
        """Return pooled liquidity in USD, or None when unknown"""
        pass


class MarketCapDisplayProvider(Provider):
    """Venue-specific market cap, already formatted for display"""

    @abstractmethod
    async def get_market_cap_display(self, chain_id: ChainId, address: str) -> Optional[str]:
        """Return a display string such as "$472B", or None when unknown"""
        pass


class MarketQuoteProvider(Provider):
    """Conventional equity quotes keyed by exchange ticker"""

    @abstractmethod
    async def get_price_change_pct(self, ticker: str) -> Optional[float]:
        """Return the latest daily change percentage for a ticker"""
        pass
