"""Market data providers module."""

from dca_analyzer.providers.market_data_provider import MarketDataProvider
from dca_analyzer.providers.stub_provider import StubMarketDataProvider

__all__ = [
    "MarketDataProvider",
    "StubMarketDataProvider",
]
