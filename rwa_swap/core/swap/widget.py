"""Initial configuration handed to the embedded swap widget."""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from ..chain_types import DEFAULT_CHAIN_ID, ChainId
from .constants import (
    DEFAULT_FROM_AMOUNT,
    DEFAULT_FROM_TOKEN,
    DEFAULT_TO_TOKEN,
    ROUTE_OPTIONS,
    WIDGET_FEE,
    WIDGET_INTEGRATOR,
)


def build_widget_config(
    featured_tokens: list[Dict[str, Any]],
    *,
    chain_id: Optional[ChainId] = None,
) -> Dict[str, Any]:
    """Widget config: initial pair, routing options, fee and featured tokens.

    Theme and container styling stay in the front end.
    """
    chain = chain_id or DEFAULT_CHAIN_ID
    return {
        "integrator": WIDGET_INTEGRATOR,
        "variant": "compact",
        "subvariant": "default",
        "fromChain": chain,
        "toChain": chain,
        "fromToken": DEFAULT_FROM_TOKEN,
        "toToken": DEFAULT_TO_TOKEN,
        "fromAmount": DEFAULT_FROM_AMOUNT,
        "sdkConfig": {"routeOptions": copy.deepcopy(ROUTE_OPTIONS)},
        "tokens": {"featured": featured_tokens},
        "buildUrl": True,
        "fee": WIDGET_FEE,
    }
