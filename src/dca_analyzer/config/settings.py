"""Application settings and configuration."""

from decimal import Decimal
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DCA_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "DCA Analyzer"
    app_version: str = "0.1.0"

    log_level: str = "INFO"

    # Market data settings
    market_data_cache_ttl_seconds: int = 300

    # Offline stub provider
    stub_provider_seed: int = 42
    stub_dividend_per_share: Decimal = Decimal("0.25")


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
