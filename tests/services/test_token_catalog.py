"""
Tests for the static Token Catalog

Tests for metadata lookup, equity detection, and ticker derivation.
"""

import pytest

from rwa_swap.core.swap import Token
from rwa_swap.services.token_catalog import (
    FEATURED_TOKENS,
    CatalogEntry,
    CatalogKind,
    TokenCatalog,
    get_stock_ticker,
    get_token_catalog,
    is_tokenized_stock,
)

NVDA_ON = "0x2d1f7226bd1f780af6b9a49dcc0ae00e8df4bdee"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


# =============================================================================
# Lookup Tests
# =============================================================================

class TestCatalogLookup:

    @pytest.fixture
    def catalog(self):
        return TokenCatalog()

    def test_lookup_by_address(self, catalog):
        entry = catalog.get_token_metadata(NVDA_ON)
        assert entry is not None
        assert entry.token.symbol == "NVDAon"
        assert entry.kind == CatalogKind.STOCK

    def test_lookup_ignores_hex_case(self, catalog):
        assert catalog.get_token_metadata(USDC.lower()).token.symbol == "USDC"
        assert catalog.get_token_metadata(NVDA_ON.upper().replace("0X", "0x")).token.symbol == "NVDAon"

    def test_unknown_and_blank(self, catalog):
        assert catalog.get_token_metadata("0x0000000000000000000000000000000000000000") is None
        assert catalog.get_token_metadata("") is None

    def test_featured_preserves_order(self, catalog):
        featured = catalog.featured()
        assert len(featured) == len(catalog) == len(FEATURED_TOKENS)
        assert [t.symbol for t in featured[:3]] == ["USDC", "USDT", "DAI"]

    def test_addresses_are_unique(self):
        keys = [entry.token.key for entry in FEATURED_TOKENS]
        assert len(keys) == len(set(keys))

    def test_shared_catalog(self):
        assert get_token_catalog() is get_token_catalog()


# =============================================================================
# Equity and Ticker Tests
# =============================================================================

class TestEquities:

    @pytest.fixture
    def catalog(self):
        return TokenCatalog()

    def test_stock_is_equity(self, catalog):
        assert catalog.is_tradable_equity(NVDA_ON)

    def test_etf_is_equity(self, catalog):
        spy = next(e for e in FEATURED_TOKENS if e.token.symbol == "SPYon")
        assert is_tokenized_stock(spy)
        assert catalog.is_tradable_equity(spy.token.address)

    def test_stablecoin_is_not_equity(self, catalog):
        assert not catalog.is_tradable_equity(USDC)

    def test_unknown_is_not_equity(self, catalog):
        assert not catalog.is_tradable_equity("So11111111111111111111111111111111111111112")

    @pytest.mark.parametrize(
        "symbol,ticker",
        [("NVDAon", "NVDA"), ("Von", "V"), ("GOOGLon", "GOOGL"), ("SPYon", "SPY")],
    )
    def test_ticker_strips_suffix(self, symbol, ticker):
        assert get_stock_ticker(Token(chain_id=1, address="0x1", symbol=symbol)) == ticker

    @pytest.mark.parametrize("symbol", ["USDC", "on", ""])
    def test_no_ticker_without_suffix(self, symbol):
        assert get_stock_ticker(Token(chain_id=1, address="0x1", symbol=symbol)) is None

    def test_ticker_for_address(self, catalog):
        assert catalog.ticker_for(NVDA_ON) == "NVDA"
        assert catalog.ticker_for("0xdead") is None

    def test_custom_entries(self):
        token = Token(chain_id=101, address="Mint111", symbol="XYZon")
        catalog = TokenCatalog([CatalogEntry(token, CatalogKind.STOCK)])
        assert catalog.is_tradable_equity("Mint111")
        assert not catalog.is_tradable_equity("mint111")
        assert catalog.ticker_for("Mint111") == "XYZ"
