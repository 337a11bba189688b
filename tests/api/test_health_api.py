import pytest
from fastapi.testclient import TestClient

from rwa_swap.main import app
from rwa_swap.providers.jupiter import JupiterProvider
from rwa_swap.services.market_data.aggregator import get_market_data_aggregator


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_all_healthy(client, make_aggregator):
    app.dependency_overrides[get_market_data_aggregator] = lambda: make_aggregator()

    data = client.get("/healthz").json()

    assert data["status"] == "healthy"
    assert data["total_providers"] == 4
    assert data["available_providers"] == 4


def test_shared_provider_reported_once(client, make_aggregator):
    jupiter = JupiterProvider(enabled=False)
    aggregator = make_aggregator(liquidity=jupiter, market_cap_display=jupiter)
    app.dependency_overrides[get_market_data_aggregator] = lambda: aggregator

    data = client.get("/healthz").json()

    assert data["total_providers"] == 3
    assert data["providers"]["jupiter"]["status"] == "disabled"
    assert data["status"] == "healthy"


def test_erroring_provider_degrades(client, make_aggregator, price_index):
    async def broken():
        return {"status": "error", "reason": "timeout"}

    price_index.health_check = broken
    app.dependency_overrides[get_market_data_aggregator] = lambda: make_aggregator()

    data = client.get("/healthz").json()

    assert data["status"] == "degraded"
    assert data["providers"]["fake_index"]["status"] == "error"
