"""Constants for swap-intent resolution."""

from ..chain_types import (
    ETHEREUM_CHAIN_ID,
    SOLANA_SEARCH_CHAIN_ID,
)

# Primary settlement chain for public tokenized equities and its quote asset
PRIMARY_SETTLEMENT_CHAIN_ID = ETHEREUM_CHAIN_ID
ETHEREUM_USDC_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
REFERENCE_STABLE_ADDRESS = ETHEREUM_USDC_ADDRESS

# Restricted venue (search-index id) and its canonical quote asset
RESTRICTED_VENUE_CHAIN_ID = SOLANA_SEARCH_CHAIN_ID
SOLANA_USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
RESTRICTED_VENUE_QUOTE_ADDRESS = SOLANA_USDC_MINT

# Initial widget pair: USDC -> NVDAon on Ethereum
DEFAULT_FROM_TOKEN = ETHEREUM_USDC_ADDRESS
DEFAULT_TO_TOKEN = "0x2d1f7226bd1f780af6b9a49dcc0ae00e8df4bdee"
DEFAULT_FROM_AMOUNT = "100"

WIDGET_INTEGRATOR = "Vaulto Swap"
WIDGET_FEE = 0.005

ROUTE_OPTIONS = {
    "maxPriceImpact": 1.0,
    "slippage": 0.03,
    "allowSwitchChain": True,
    "allowDestinationCall": True,
    "order": "CHEAPEST",
    "exchanges": {"allow": ["all"]},
    "bridges": {"allow": ["all"]},
}
