"""Market data provider protocol."""

from datetime import date
from typing import Protocol

from dca_analyzer.domain.models import PriceObservation


class MarketDataProvider(Protocol):
    """
    Protocol for historical market data providers.

    Implementations return daily closing prices and dividends for a symbol.
    Order and uniqueness of dates are not guaranteed; the schedule builder
    normalizes both.
    """

    def get_price_history(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
    ) -> list[PriceObservation]:
        """
        Fetch price history for a symbol between two dates (inclusive).

        Days without trading are omitted. Raises on network or provider
        failure.
        """
        ...
