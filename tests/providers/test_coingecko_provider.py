import math
from unittest.mock import AsyncMock

import httpx
import pytest

from rwa_swap.providers import coingecko as cg
from rwa_swap.services.market_data import ProviderUnavailable

NVDA_ON = "0x2d1f7226bd1f780af6b9a49dcc0ae00e8df4bdee"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"

_RealAsyncClient = httpx.AsyncClient


def _install(monkeypatch, handler):
    requests = []

    def _handler(request):
        requests.append(request)
        return handler(request)

    def _client(*args, **kwargs):
        return _RealAsyncClient(transport=httpx.MockTransport(_handler))

    monkeypatch.setattr(cg.httpx, "AsyncClient", _client)
    return requests


@pytest.fixture
def provider(monkeypatch):
    monkeypatch.setattr(cg.settings, "enable_coingecko", True)
    return cg.CoingeckoProvider(api_key="", base_url="https://cg.test/api/v3/")


@pytest.mark.asyncio
async def test_token_price_fields(monkeypatch, provider):
    payload = {
        NVDA_ON: {
            "usd": 181.2,
            "usd_market_cap": 4.4e12,
            "usd_24h_vol": 1_250_000.5,
            "usd_24h_change": -1.75,
        }
    }
    requests = _install(monkeypatch, lambda request: httpx.Response(200, json=payload))

    quote = await provider.get_token_market_data(1, NVDA_ON)

    assert quote.price_usd == 181.2
    assert quote.market_cap == 4.4e12
    assert quote.total_volume == 1_250_000.5
    assert quote.price_change_percentage_24h == -1.75

    request = requests[0]
    assert request.url.path == "/api/v3/simple/token_price/ethereum"
    assert request.url.params["contract_addresses"] == NVDA_ON
    assert request.url.params["include_24hr_change"] == "true"
    assert "X-CG-Demo-API-Key" not in request.headers


@pytest.mark.asyncio
async def test_matches_lowercased_hex_key(monkeypatch, provider):
    checksummed = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
    payload = {checksummed.lower(): {"usd": 1.0, "usd_24h_vol": 10}}
    _install(monkeypatch, lambda request: httpx.Response(200, json=payload))

    quote = await provider.get_token_market_data(1, checksummed)

    assert quote.total_volume == 10.0
    assert quote.market_cap is None
    assert quote.price_change_percentage_24h is None


@pytest.mark.asyncio
async def test_solana_mint_uses_solana_platform(monkeypatch, provider):
    requests = _install(
        monkeypatch, lambda request: httpx.Response(200, json={USDC_MINT: {"usd": 1.0}})
    )

    quote = await provider.get_token_market_data(101, USDC_MINT)

    assert quote.price_usd == 1.0
    assert requests[0].url.path.endswith("/simple/token_price/solana")


@pytest.mark.asyncio
async def test_unlisted_token_is_none(monkeypatch, provider):
    _install(monkeypatch, lambda request: httpx.Response(200, json={}))
    assert await provider.get_token_market_data(1, NVDA_ON) is None


@pytest.mark.asyncio
async def test_not_found_is_none(monkeypatch, provider):
    _install(monkeypatch, lambda request: httpx.Response(404, json={"error": "not found"}))
    assert await provider.get_token_market_data(1, NVDA_ON) is None


@pytest.mark.asyncio
async def test_unknown_chain_skips_request(monkeypatch, provider):
    requests = _install(monkeypatch, lambda request: httpx.Response(200, json={}))
    assert await provider.get_token_market_data(424242, NVDA_ON) is None
    assert requests == []


@pytest.mark.asyncio
async def test_server_error_raises_unavailable(monkeypatch, provider):
    _install(monkeypatch, lambda request: httpx.Response(503, text="down"))
    with pytest.raises(ProviderUnavailable) as exc_info:
        await provider.get_token_market_data(1, NVDA_ON)
    assert exc_info.value.provider == "coingecko"
    assert "503" in exc_info.value.reason


@pytest.mark.asyncio
async def test_rate_limit_retried_once(monkeypatch, provider):
    monkeypatch.setattr(cg.asyncio, "sleep", AsyncMock())
    responses = iter([
        httpx.Response(429, json={}),
        httpx.Response(200, json={NVDA_ON: {"usd_24h_change": 0.5}}),
    ])
    requests = _install(monkeypatch, lambda request: next(responses))

    quote = await provider.get_token_market_data(1, NVDA_ON)

    assert quote.price_change_percentage_24h == 0.5
    assert len(requests) == 2


@pytest.mark.asyncio
async def test_non_finite_values_dropped(monkeypatch, provider):
    # Python's json module accepts NaN/Infinity literals
    body = '{"%s": {"usd": NaN, "usd_24h_change": Infinity, "usd_24h_vol": 5}}' % NVDA_ON
    _install(monkeypatch, lambda request: httpx.Response(200, content=body.encode()))

    quote = await provider.get_token_market_data(1, NVDA_ON)

    assert quote.price_usd is None
    assert quote.price_change_percentage_24h is None
    assert quote.total_volume == 5.0


@pytest.mark.asyncio
async def test_api_key_header(monkeypatch):
    monkeypatch.setattr(cg.settings, "enable_coingecko", True)
    provider = cg.CoingeckoProvider(api_key="demo-key", base_url="https://cg.test")
    requests = _install(monkeypatch, lambda request: httpx.Response(200, json={}))

    await provider.get_token_market_data(1, NVDA_ON)

    assert requests[0].headers["X-CG-Demo-API-Key"] == "demo-key"


@pytest.mark.asyncio
async def test_disabled_provider(monkeypatch, provider):
    monkeypatch.setattr(cg.settings, "enable_coingecko", False)
    assert await provider.get_token_market_data(1, NVDA_ON) is None
    health = await provider.health_check()
    assert health["status"] == "unavailable"


def test_as_float():
    assert cg._as_float(3) == 3.0
    assert cg._as_float(True) is None
    assert cg._as_float("1.5") is None
    assert cg._as_float(math.inf) is None


@pytest.mark.asyncio
async def test_health_check_pings(monkeypatch, provider):
    requests = _install(monkeypatch, lambda request: httpx.Response(200, json={"gecko_says": "(V3) To the Moon!"}))

    health = await provider.health_check()

    assert health["status"] == "healthy"
    assert requests[0].url.path == "/api/v3/ping"


@pytest.mark.asyncio
async def test_health_check_reports_error(monkeypatch, provider):
    _install(monkeypatch, lambda request: httpx.Response(500, text="down"))

    health = await provider.health_check()

    assert health == {"status": "error", "reason": "HTTP 500"}
