from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import health, swap, token_data
from .config import settings
from .logging_config import setup_logging
from .middleware import RequestLoggingMiddleware

setup_logging()
logger = structlog.stdlib.get_logger("rwa_swap")

SERVICE_NAME = "RWA Swap API"
SERVICE_DESCRIPTION = "Asset routing and market data for tokenized real-world-asset swaps"


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info(
        "service_starting",
        version=__version__,
        coingecko=settings.enable_coingecko,
        coingecko_key=settings.has_coingecko_key,
        jupiter_market_data=settings.enable_jupiter_market_data,
        market_quotes=settings.enable_market_quotes,
        provider_timeout_s=settings.provider_timeout_seconds,
    )
    yield
    logger.info("service_stopped")


app = FastAPI(
    title=SERVICE_NAME,
    description=SERVICE_DESCRIPTION,
    version=__version__,
    lifespan=lifespan,
)

# Browser front end calls token-data and swap routes directly
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=["x-request-id"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(token_data.router, tags=["Market Data"])
app.include_router(swap.router, tags=["Swap"])


@app.get("/")
async def root():
    """Service name, version and route map"""
    return {
        "name": SERVICE_NAME,
        "version": __version__,
        "routes": {
            "tokenData": ["/solana/token-data", "/chains/{chain_id}/token-data"],
            "swapIntent": "/swap/intent",
            "widgetConfig": "/swap/widget-config",
        },
        "docs": "/docs",
        "health": "/healthz",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rwa_swap.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
