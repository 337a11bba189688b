"""Market cap display formatting shared with the Solana venue's token pages."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

_UNITS = (
    (1_000_000_000_000, "T"),
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def _to_fixed_0(value: float) -> str:
    # Halves round up, on the exact binary value
    return str(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_market_cap(value: float) -> str:
    """Format a market cap the way the venue displays it.

    >>> format_market_cap(472_000_000_000)
    '$472B'
    >>> format_market_cap(999)
    '$999'
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite market cap: {value!r}")

    for threshold, suffix in _UNITS:
        if value >= threshold:
            return f"${_to_fixed_0(value / threshold)}{suffix}"
    return f"${_to_fixed_0(value)}"
