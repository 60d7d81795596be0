"""Market data service for historical price series."""

import logging
from datetime import date, datetime

from dca_analyzer.core.calendar import now_eastern
from dca_analyzer.core.exceptions import MarketDataError
from dca_analyzer.domain.models import PriceObservation
from dca_analyzer.providers.market_data_provider import MarketDataProvider

logger = logging.getLogger(__name__)

HistoryKey = tuple[str, date, date]


class MarketDataService:
    """
    Service for fetching historical price data.

    Wraps provider with caching and graceful degradation.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        cache_ttl_seconds: int = 300,
    ):
        self._provider = provider
        self._cache_ttl = cache_ttl_seconds
        self._history_cache: dict[HistoryKey, list[PriceObservation]] = {}
        self._cache_times: dict[HistoryKey, datetime] = {}

    def get_price_history(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
    ) -> list[PriceObservation]:
        """
        Fetch price history for a symbol with caching.

        Uses cached data if within TTL; falls back to stale cache on provider
        failure. Storing a fresh series evicts every expired one. Raises
        MarketDataError when the provider fails and nothing is cached for the
        request.
        """
        key = (symbol.strip().upper(), start_date, end_date)

        if self._is_cache_valid(key):
            return list(self._history_cache[key])

        try:
            history = self._provider.get_price_history(*key)
        except Exception as e:
            if key in self._history_cache:
                logger.warning("Provider failed for %s, serving cached history: %s", key[0], e)
                return list(self._history_cache[key])
            logger.warning("Provider failed for %s with no cached history: %s", key[0], e)
            raise MarketDataError(key[0], str(e)) from e

        cached_at = now_eastern()
        self._evict_expired(cached_at)
        self._history_cache[key] = list(history)
        self._cache_times[key] = cached_at
        return list(history)

    def clear_cache(self) -> None:
        """Drop all cached series."""
        self._history_cache.clear()
        self._cache_times.clear()

    def _is_cache_valid(self, key: HistoryKey) -> bool:
        """Check if the cached series for key is within TTL."""
        cached_at = self._cache_times.get(key)
        if cached_at is None:
            return False
        elapsed = (now_eastern() - cached_at).total_seconds()
        return elapsed < self._cache_ttl

    def _evict_expired(self, now: datetime) -> None:
        """Drop series older than the TTL."""
        expired = [
            key for key, cached_at in self._cache_times.items()
            if (now - cached_at).total_seconds() >= self._cache_ttl
        ]
        for key in expired:
            del self._history_cache[key]
            del self._cache_times[key]
