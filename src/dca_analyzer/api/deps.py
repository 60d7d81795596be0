"""Dependency injection for FastAPI."""

from functools import lru_cache

from fastapi import Depends

from dca_analyzer.config.settings import get_settings
from dca_analyzer.providers.stub_provider import StubMarketDataProvider
from dca_analyzer.services import AnalysisService, MarketDataService


def get_market_provider() -> StubMarketDataProvider:
    """Provide MarketDataProvider instance (stub for offline operation)."""
    settings = get_settings()
    return StubMarketDataProvider(
        seed=settings.stub_provider_seed,
        dividend_per_share=settings.stub_dividend_per_share,
    )


@lru_cache
def _shared_market_data_service() -> MarketDataService:
    settings = get_settings()
    return MarketDataService(
        provider=get_market_provider(),
        cache_ttl_seconds=settings.market_data_cache_ttl_seconds,
    )


def get_market_data_service() -> MarketDataService:
    """Provide MarketDataService instance (shared so its cache survives requests)."""
    return _shared_market_data_service()


def get_analysis_service(
    market_data_service: MarketDataService = Depends(get_market_data_service),
) -> AnalysisService:
    """Provide AnalysisService instance."""
    return AnalysisService(market_data_service=market_data_service)
