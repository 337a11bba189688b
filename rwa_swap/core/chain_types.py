"""
Chain identification types and utilities.

Two collaborators disagree about how Solana is numbered: the token search
index (and the market-data route) uses ``101`` while the embedded swap widget
expects its own large integer id. ``ChainIdRemap`` keeps the two id spaces
apart; widget ids are only produced when building widget commands.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

ChainId = int

ETHEREUM_CHAIN_ID: ChainId = 1

# Solana as numbered by the token search index and market-data endpoints
SOLANA_SEARCH_CHAIN_ID: ChainId = 101

# Solana as numbered by the swap widget
SOLANA_WIDGET_CHAIN_ID: ChainId = 1151111081099710

# Default chain when none specified
DEFAULT_CHAIN_ID: ChainId = ETHEREUM_CHAIN_ID


class ChainIdRemap:
    """Fixed bidirectional table between search-index and widget chain ids.

    Chains without an entry use the same id in both spaces, so lookups fall
    through unchanged.

    Usage:
        remap = ChainIdRemap({101: 1151111081099710})
        remap.to_widget(101)                 # 1151111081099710
        remap.to_search(1151111081099710)    # 101
        remap.to_widget(1)                   # 1
    """

    def __init__(self, search_to_widget: Mapping[ChainId, ChainId]) -> None:
        self._to_widget: Dict[ChainId, ChainId] = dict(search_to_widget)
        self._to_search: Dict[ChainId, ChainId] = {
            widget_id: search_id for search_id, widget_id in self._to_widget.items()
        }
        if len(self._to_search) != len(self._to_widget):
            raise ValueError("Chain id remap must be one-to-one")

    def to_widget(self, chain_id: ChainId) -> ChainId:
        return self._to_widget.get(chain_id, chain_id)

    def to_search(self, chain_id: ChainId) -> ChainId:
        return self._to_search.get(chain_id, chain_id)

    def is_remapped(self, chain_id: ChainId) -> bool:
        """True when ``chain_id`` belongs to either side of a table entry."""
        return chain_id in self._to_widget or chain_id in self._to_search

    def __len__(self) -> int:
        return len(self._to_widget)


CHAIN_ID_REMAP = ChainIdRemap({SOLANA_SEARCH_CHAIN_ID: SOLANA_WIDGET_CHAIN_ID})


def is_solana_chain(chain_id: ChainId) -> bool:
    """Check if the chain ID represents Solana in either id space."""
    return chain_id in (SOLANA_SEARCH_CHAIN_ID, SOLANA_WIDGET_CHAIN_ID)


def is_hex_address(address: str) -> bool:
    return address[:2].lower() == "0x"


def normalize_address(address: str) -> str:
    """Canonical comparison form: hex addresses lowercased, base58 untouched."""
    address = address.strip()
    if is_hex_address(address):
        return address.lower()
    return address


def same_address(left: Optional[str], right: Optional[str]) -> bool:
    if left is None or right is None:
        return False
    return normalize_address(left) == normalize_address(right)


# Mapping from chain ID to Coingecko platform slug
COINGECKO_PLATFORMS: Dict[ChainId, str] = {
    ETHEREUM_CHAIN_ID: "ethereum",
    10: "optimistic-ethereum",
    56: "binance-smart-chain",
    137: "polygon-pos",
    8453: "base",
    42161: "arbitrum-one",
    43114: "avalanche",
    SOLANA_SEARCH_CHAIN_ID: "solana",
    SOLANA_WIDGET_CHAIN_ID: "solana",
}


def coingecko_platform_for_chain(chain_id: ChainId) -> Optional[str]:
    """Return the Coingecko platform slug for a chain, or ``None`` if unknown."""
    return COINGECKO_PLATFORMS.get(chain_id)


__all__ = [
    "ChainId",
    "ChainIdRemap",
    "CHAIN_ID_REMAP",
    "ETHEREUM_CHAIN_ID",
    "SOLANA_SEARCH_CHAIN_ID",
    "SOLANA_WIDGET_CHAIN_ID",
    "DEFAULT_CHAIN_ID",
    "COINGECKO_PLATFORMS",
    "coingecko_platform_for_chain",
    "is_solana_chain",
    "is_hex_address",
    "normalize_address",
    "same_address",
]
