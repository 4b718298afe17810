"""Configuration management for the wallet console."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    api_title: str = "CDP Wallet Console"
    api_version: str = "1.0.0"
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000

    # CORS Configuration
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Wallet platform Configuration
    platform_base_url: str = "http://localhost:3000"
    request_timeout_seconds: float = 30.0  # Applies to httpx and to every AsyncAction

    # Networks a wallet can be created on
    supported_networks: list[str] = ["base-sepolia", "base-mainnet"]

    # Pagination
    wallets_per_page_options: list[int] = [10, 20, 50, 100]
    balances_per_page_options: list[int] = [5, 10, 20, 50]
    reset_page_on_size_change: bool = True

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
