import pytest
from pydantic import ValidationError

from rwa_swap.config import Settings


def test_defaults(monkeypatch):
    """Market-data integrations default to the price index plus quote fallback."""

    for name in ("ENABLE_JUPITER_MARKET_DATA", "ENABLE_MARKET_QUOTES", "PROVIDER_TIMEOUT_SECONDS", "COINGECKO_API_KEY"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.enable_coingecko is True
    assert settings.enable_jupiter_market_data is False
    assert settings.enable_market_quotes is True
    assert settings.provider_timeout_seconds == 8.0
    assert settings.provider_max_concurrency == 5
    assert settings.has_coingecko_key is False


def test_env_overrides(monkeypatch):
    """Environment variables override every provider setting."""

    monkeypatch.setenv("ENABLE_JUPITER_MARKET_DATA", "true")
    monkeypatch.setenv("JUPITER_BASE_URL", "https://jup.example")
    monkeypatch.setenv("COINGECKO_API_KEY", "demo-key")
    monkeypatch.setenv("PROVIDER_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("PROVIDER_MAX_CONCURRENCY", "3")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://app.example"]')

    settings = Settings(_env_file=None)

    assert settings.enable_jupiter_market_data is True
    assert settings.jupiter_base_url == "https://jup.example"
    assert settings.has_coingecko_key is True
    assert settings.provider_timeout_seconds == 2.5
    assert settings.provider_max_concurrency == 3
    assert settings.cors_allow_origins == ["https://app.example"]


def test_rejects_non_positive_limits(monkeypatch):
    monkeypatch.setenv("PROVIDER_MAX_CONCURRENCY", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
