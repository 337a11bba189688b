"""
Static token catalog.

Featured tokens offered by the swap widget: the major stablecoins and the
tokenized ETFs/stocks (``on`` suffix) on Ethereum. The catalog also answers
whether a token is a tradable equity and which exchange ticker backs it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional

from ..core.chain_types import ETHEREUM_CHAIN_ID, normalize_address
from ..core.swap.models import Token

_CG_IMAGES = "https://coin-images.coingecko.com/coins/images"

TOKENIZED_STOCK_SUFFIX = "on"


class CatalogKind(str, Enum):
    STABLECOIN = "stablecoin"
    ETF = "etf"
    STOCK = "stock"


@dataclass(frozen=True)
class CatalogEntry:
    token: Token
    kind: CatalogKind

    @property
    def is_equity(self) -> bool:
        return self.kind in (CatalogKind.ETF, CatalogKind.STOCK)


def _eth(address: str, symbol: str, name: str, decimals: int, image: str) -> Token:
    return Token(
        chain_id=ETHEREUM_CHAIN_ID,
        address=address,
        symbol=symbol,
        name=name,
        decimals=decimals,
        logo_uri=f"{_CG_IMAGES}/{image}",
    )


FEATURED_TOKENS: List[CatalogEntry] = [
    # Major stablecoins
    CatalogEntry(_eth("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", "USDC", "USD Coin", 6, "6319/large/usdc.png"), CatalogKind.STABLECOIN),
    CatalogEntry(_eth("0xdAC17F958D2ee523a2206206994597C13D831ec7", "USDT", "Tether USD", 6, "325/large/tether.png"), CatalogKind.STABLECOIN),
    CatalogEntry(_eth("0x6B175474E89094C44Da98b954EedeAC495271d0F", "DAI", "Dai Stablecoin", 18, "9956/large/dai-multi-collateral-mcd.png"), CatalogKind.STABLECOIN),

    # ETFs
    CatalogEntry(_eth("0xfedc5f4a6c38211c1338aa411018dfaf26612c08", "SPYon", "SPDR S&P 500 ETF Trust", 18, "68655/large/spyon_160x160.png"), CatalogKind.ETF),
    CatalogEntry(_eth("0x62ca254a363dc3c748e7e955c20447ab5bf06ff7", "IVVon", "iShares Core S&P 500 ETF", 18, "68650/large/ivvon_160x160.png"), CatalogKind.ETF),
    CatalogEntry(_eth("0x0e397938c1aa0680954093495b70a9f5e2249aba", "QQQon", "Invesco QQQ Trust", 18, "68654/large/qqqon_160x160.png"), CatalogKind.ETF),
    CatalogEntry(_eth("0x992651bfeb9a0dcc4457610e284ba66d86489d4d", "TLTon", "iShares 20+ Year Treasury Bond ETF", 18, "68647/large/tlton_160x160.png"), CatalogKind.ETF),

    # Tech
    CatalogEntry(_eth("0x2d1f7226bd1f780af6b9a49dcc0ae00e8df4bdee", "NVDAon", "NVIDIA Corp", 18, "68623/large/nvdaon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x14c3abf95cb9c93a8b82c1cdcb76d72cb87b2d4c", "AAPLon", "Apple Inc.", 18, "68616/large/aaplon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0xb812837b81a3a6b81d7cd74cfb19a7f2784555e5", "MSFTon", "Microsoft Corporation", 18, "68625/large/msfton_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0xbb8774fb97436d23d74c1b882e8e9a69322cfd31", "AMZNon", "Amazon.com, Inc.", 18, "68604/large/amznon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0xba47214edd2bb43099611b208f75e4b42fdcfedc", "GOOGLon", "Alphabet Inc. Class A", 18, "68606/large/googlon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x59644165402b611b350645555b50afb581c71eb2", "METAon", "Meta Platforms, Inc.", 18, "68645/large/metaon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0xf6b1117ec07684d3958cad8beb1b302bfd21103f", "TSLAon", "Tesla Inc.", 18, "68628/large/tslaon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x0c1f3412a44ff99e40bf14e06e5ea321ae7b3938", "AMDon", "Advanced Micro Devices, Inc.", 18, "68589/large/amdon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0xfda09936dbd717368de0835ba441d9e62069d36f", "INTCon", "Intel Corp", 18, "68557/large/intcon_160x160.png"), CatalogKind.STOCK),

    # Financials and consumer
    CatalogEntry(_eth("0x03c1ec4ca9dbb168e6db0def827c085999cbffaf", "JPMon", "JPMorgan Chase & Co.", 18, "68602/large/jpmon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0xac37c20c1d0e5285035e056101a64e263ff94a41", "Von", "Visa Inc. Class A", 18, "68626/large/von_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x82106347ddbb23ce44cf4ce4053ef1adf8b9323b", "WMTon", "Walmart Inc.", 18, "68582/large/wmton_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x4c82c8cd9a218612dce60b156b73a36705645e3b", "MCDon", "McDonald's Corporation", 18, "68620/large/mcdon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x74a03d741226f738098c35da8188e57aca50d146", "KOon", "The Coca-Cola Company", 18, "68569/large/koon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x3ce219d498d807317f840f4cb0f03fa27dd65046", "PEPon", "PepsiCo, Inc.", 18, "68588/large/pepon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x032dec3372f25c41ea8054b4987a7c4832cdb338", "NFLXon", "Netflix", 18, "68649/large/nflxon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0xc3d93b45249e8e06cfeb01d25a96337e8893265d", "DISon", "Disney", 18, "68587/large/dison_160x160.png"), CatalogKind.STOCK),

    # Healthcare
    CatalogEntry(_eth("0xf192957ae52db3eb088654403cc2eded014ae556", "LLYon", "Eli Lilly and Company", 18, "68643/large/llyon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x075756f3b6381a79633438faa8964946bf40163d", "UNHon", "UnitedHealth Group", 18, "68624/large/unhon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x06954faa913fa14c28eb1b2e459594f22f33f3de", "PFEon", "Pfizer Inc.", 18, "68549/large/pfeon_160x160.png"), CatalogKind.STOCK),
    CatalogEntry(_eth("0x3859385363f7bb4dfe42811ccf3f294fcd41dd1d", "ABTon", "Abbott Laboratories", 18, "68552/large/abton_160x160.png"), CatalogKind.STOCK),
]


class TokenCatalog:
    """Address-indexed view over catalog entries (any chain)."""

    def __init__(self, entries: Iterable[CatalogEntry] = FEATURED_TOKENS) -> None:
        self._entries: List[CatalogEntry] = list(entries)
        self._by_address: Dict[str, CatalogEntry] = {
            normalize_address(entry.token.address): entry for entry in self._entries
        }

    def get_token_metadata(self, address: str) -> Optional[CatalogEntry]:
        if not address:
            return None
        return self._by_address.get(normalize_address(address))

    def is_tradable_equity(self, address: str) -> bool:
        """Default equity heuristic for the price-change fallback."""
        entry = self.get_token_metadata(address)
        return entry is not None and is_tokenized_stock(entry)

    def ticker_for(self, address: str) -> Optional[str]:
        entry = self.get_token_metadata(address)
        if entry is None:
            return None
        return get_stock_ticker(entry.token)

    def featured(self) -> List[Token]:
        return [entry.token for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)


def is_tokenized_stock(entry: CatalogEntry) -> bool:
    return entry.is_equity


def get_stock_ticker(token: Token) -> Optional[str]:
    """Underlying exchange ticker, e.g. ``NVDAon`` -> ``NVDA``."""
    symbol = (token.symbol or "").strip()
    if symbol.endswith(TOKENIZED_STOCK_SUFFIX) and len(symbol) > len(TOKENIZED_STOCK_SUFFIX):
        return symbol[: -len(TOKENIZED_STOCK_SUFFIX)].upper()
    return None


_catalog: Optional[TokenCatalog] = None


def get_token_catalog() -> TokenCatalog:
    global _catalog
    if _catalog is None:
        _catalog = TokenCatalog()
    return _catalog
