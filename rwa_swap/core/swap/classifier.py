"""
Asset Classifier

Places a selectable token into exactly one routing category:
- Private/restricted-venue assets live on the restricted venue chain
- Public tokenized equities live on the primary settlement chain and are
  not the chain's reference stablecoin
- Everything else is ordinary
"""

from __future__ import annotations

from typing import Iterable, Optional, Set

from ..chain_types import CHAIN_ID_REMAP, ChainId, ChainIdRemap, same_address
from .constants import (
    PRIMARY_SETTLEMENT_CHAIN_ID,
    REFERENCE_STABLE_ADDRESS,
    RESTRICTED_VENUE_CHAIN_ID,
)
from .models import AssetCategory, Token


class AssetClassifier:
    """
    Classifies tokens into routing categories from static chain data.

    The classifier only looks at ``(chain_id, address)``; it never performs I/O
    and returns the same category for the same token every time.
    """

    def __init__(
        self,
        *,
        restricted_chain_id: ChainId = RESTRICTED_VENUE_CHAIN_ID,
        settlement_chain_id: ChainId = PRIMARY_SETTLEMENT_CHAIN_ID,
        reference_stable_address: str = REFERENCE_STABLE_ADDRESS,
        remap: ChainIdRemap = CHAIN_ID_REMAP,
    ) -> None:
        self.settlement_chain_id = settlement_chain_id
        self.reference_stable_address = reference_stable_address
        self.remap = remap
        # Tokens read back from widget state carry the widget id of the venue
        self._restricted_chain_ids: Set[ChainId] = {
            restricted_chain_id,
            remap.to_widget(restricted_chain_id),
        }

    def classify(self, token: Token) -> AssetCategory:
        """
        Classify a token.

        Args:
            token: Selected token (search-index chain id space)

        Returns:
            The single AssetCategory the token belongs to
        """
        if self.is_restricted_chain(token.chain_id):
            return AssetCategory.PRIVATE_RESTRICTED

        if token.chain_id == self.settlement_chain_id and not self.is_reference_stable(token.address):
            return AssetCategory.PUBLIC_TOKENIZED_EQUITY

        return AssetCategory.ORDINARY

    def classify_many(self, tokens: Iterable[Token]) -> list[AssetCategory]:
        return [self.classify(token) for token in tokens]

    def is_restricted_chain(self, chain_id: ChainId) -> bool:
        return chain_id in self._restricted_chain_ids

    def is_reference_stable(self, address: Optional[str]) -> bool:
        return same_address(address, self.reference_stable_address)


_default_classifier: Optional[AssetClassifier] = None


def get_asset_classifier() -> AssetClassifier:
    """Shared classifier built from the module constants."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = AssetClassifier()
    return _default_classifier
