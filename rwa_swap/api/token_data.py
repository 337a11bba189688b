import json
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..core.chain_types import SOLANA_SEARCH_CHAIN_ID
from ..services.market_data.aggregator import MarketDataAggregator, get_market_data_aggregator
from ..services.market_data.errors import InvalidRequest

logger = logging.getLogger(__name__)

router = APIRouter()

NO_STORE_HEADERS = {"Cache-Control": "no-store, no-cache, must-revalidate"}


class TokenMarketData(BaseModel):
    address: str
    tvlUSD: Optional[float] = Field(default=None, description="Liquidity in USD (omitted when unknown)")
    volumeUSD: float = Field(description="24h trading volume in USD, 0 when unknown")
    marketCap: Optional[float] = Field(default=None, description="Numeric market cap from the price index")
    marketCapFormatted: Optional[str] = Field(default=None, description="Venue-formatted market cap, e.g. $472B")
    priceChange24h: Optional[float] = Field(default=None, description="24h price change percentage")


class TokenDataResponse(BaseModel):
    chainId: int
    tokens: List[TokenMarketData]
    error: Optional[str] = None


def _error(chain_id: int, message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        {"chainId": chain_id, "tokens": [], "error": message},
        status_code=status_code,
        headers=NO_STORE_HEADERS,
    )


async def _token_data(chain_id: int, request: Request, aggregator: MarketDataAggregator) -> JSONResponse:
    try:
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise InvalidRequest("Request body must be a JSON object.")
        if not isinstance(body, dict):
            raise InvalidRequest("Request body must be a JSON object.")

        batch = await aggregator.aggregate(chain_id, body.get("addresses"))
        return JSONResponse(batch.to_dict(), headers=NO_STORE_HEADERS)
    except InvalidRequest as e:
        return _error(chain_id, str(e), 400)
    except Exception:
        logger.exception("Error in token-data route for chain %s", chain_id)
        return _error(chain_id, "Internal server error", 500)


@router.post("/solana/token-data", response_model=TokenDataResponse, response_model_exclude_none=True)
async def post_solana_token_data(
    request: Request,
    aggregator: MarketDataAggregator = Depends(get_market_data_aggregator),
) -> JSONResponse:
    """
    Liquidity, volume, market cap and 24h change for Solana tokens.

    Request body: ``{"addresses": ["<mint>", ...]}``
    """
    return await _token_data(SOLANA_SEARCH_CHAIN_ID, request, aggregator)


@router.post("/chains/{chain_id}/token-data", response_model=TokenDataResponse, response_model_exclude_none=True)
async def post_chain_token_data(
    chain_id: int,
    request: Request,
    aggregator: MarketDataAggregator = Depends(get_market_data_aggregator),
) -> JSONResponse:
    """Same contract as ``/solana/token-data`` for any chain id."""
    return await _token_data(chain_id, request, aggregator)
