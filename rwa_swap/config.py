from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    cors_allow_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from the browser",
    )

    # General price index (CoinGecko)
    enable_coingecko: bool = Field(default=True, description="Enable Coingecko provider")
    coingecko_api_key: str = Field(default="", description="Coingecko API key")
    coingecko_base_url: str = Field(
        default="https://api.coingecko.com/api/v3",
        description="Coingecko API base URL",
    )

    # Venue-specific market data (Jupiter)
    enable_jupiter_market_data: bool = Field(
        default=False,
        description="Use Jupiter for Solana liquidity and formatted market cap",
    )
    jupiter_base_url: str = Field(
        default="https://lite-api.jup.ag",
        description="Jupiter API base URL",
    )

    # Market quotes fallback (Yahoo Finance via yfinance)
    enable_market_quotes: bool = Field(
        default=True,
        description="Fall back to equity quotes for tokenized stock price change",
    )

    # Provider resource limits
    provider_timeout_seconds: float = Field(
        default=8.0,
        gt=0,
        description="Timeout applied to every individual provider call",
    )
    provider_max_concurrency: int = Field(
        default=5,
        ge=1,
        description="Maximum in-flight calls per provider",
    )

    @property
    def has_coingecko_key(self) -> bool:
        return bool(self.coingecko_api_key)


# Global settings instance
settings = Settings()
