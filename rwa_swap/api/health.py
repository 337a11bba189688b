from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..services.market_data.aggregator import MarketDataAggregator, get_market_data_aggregator

router = APIRouter()

OK_STATUSES = ("healthy", "unavailable", "disabled")


@router.get("/healthz")
async def health_check(
    aggregator: MarketDataAggregator = Depends(get_market_data_aggregator),
) -> Dict[str, Any]:
    """Health check endpoint that verifies provider status"""

    providers = {}
    for provider in (
        aggregator.price_index,
        aggregator.liquidity,
        aggregator.market_cap_display,
        aggregator.quotes,
    ):
        providers.setdefault(provider.name, provider)

    provider_status = {name: await provider.health_check() for name, provider in providers.items()}

    all_ok = all(status["status"] in OK_STATUSES for status in provider_status.values())

    available_providers = sum(
        1 for status in provider_status.values()
        if status["status"] == "healthy"
    )

    return {
        "status": "healthy" if all_ok and available_providers > 0 else "degraded",
        "providers": provider_status,
        "available_providers": available_providers,
        "total_providers": len(provider_status)
    }
