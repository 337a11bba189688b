"""
Swap Subsystem

Token classification and swap-intent resolution for the embedded swap widget.
"""

from .classifier import AssetClassifier, get_asset_classifier
from .models import (
    AssetCategory,
    FieldSetCommand,
    FormField,
    SwapFormState,
    SwapLegRole,
    Token,
    TokenSelectionEvent,
)
from .resolver import (
    FormControlUnavailable,
    InMemorySwapForm,
    SwapFormController,
    SwapIntentResolver,
)

__all__ = [
    "AssetCategory",
    "AssetClassifier",
    "FieldSetCommand",
    "FormControlUnavailable",
    "FormField",
    "InMemorySwapForm",
    "SwapFormController",
    "SwapFormState",
    "SwapIntentResolver",
    "SwapLegRole",
    "Token",
    "TokenSelectionEvent",
    "get_asset_classifier",
]
