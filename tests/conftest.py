"""
Pytest configuration and fixtures for DCA analyzer tests.

This module provides:
- Price series builders
- Investment policy factories
- Deterministic and failing market data providers
- Service fixtures
- FastAPI test client
"""

from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient

from dca_analyzer.main import app
from dca_analyzer.api.deps import get_market_data_service
from dca_analyzer.config.settings import reset_settings
from dca_analyzer.core.calendar import EASTERN_TZ, Frequency, is_weekday
from dca_analyzer.domain.models import InvestmentPolicy, LedgerEntry, PriceObservation
from dca_analyzer.providers.stub_provider import StubMarketDataProvider
from dca_analyzer.services import AnalysisService, MarketDataService


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


# =============================================================================
# PRICE SERIES HELPERS
# =============================================================================


def obs(day: str, price: str, dividend: Optional[str] = None) -> PriceObservation:
    """Shorthand for a PriceObservation from strings."""
    return PriceObservation(date=day, price=Decimal(price), dividend=dividend)


def weekday_series(
    start: date,
    end: date,
    price: Decimal = Decimal("10"),
    step: Decimal = Decimal("0"),
) -> list[PriceObservation]:
    """One observation per weekday, price increasing by step each day."""
    result = []
    current = start
    while current <= end:
        if is_weekday(current):
            result.append(PriceObservation(date=current, price=price))
            price += step
        current += timedelta(days=1)
    return result


@pytest.fixture
def scenario_a_series() -> list[PriceObservation]:
    """Three monthly trading days (from Tue 2023-01-03) priced at 10, 20 and 25."""
    return [
        obs("2023-01-03", "10"),
        obs("2023-02-03", "20"),
        obs("2023-03-03", "25"),
    ]


# =============================================================================
# POLICY FIXTURES
# =============================================================================


@pytest.fixture
def policy_factory() -> Callable[..., InvestmentPolicy]:
    """Factory for investment policies with sensible defaults."""

    def _create_policy(
        symbol: str = "TEST",
        start_date: str = "2023-01-01",
        end_date: str = "2023-03-31",
        frequency: Frequency = Frequency.MONTHLY,
        amount: str = "100",
        reinvest_dividends: bool = False,
        reinvested_dividends_as_principal: bool = True,
    ) -> InvestmentPolicy:
        return InvestmentPolicy(
            symbol=symbol,
            start_date=start_date,
            end_date=end_date,
            frequency=frequency,
            amount=Decimal(amount),
            reinvest_dividends=reinvest_dividends,
            reinvested_dividends_as_principal=reinvested_dividends_as_principal,
        )

    return _create_policy


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


class DeterministicMarketProvider:
    """
    Deterministic market data provider for testing.

    Serves a fixed series per symbol and counts calls.
    """

    def __init__(self, series: Optional[dict[str, list[PriceObservation]]] = None):
        self._series = series or {}
        self.calls = 0

    def get_price_history(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
    ) -> list[PriceObservation]:
        self.calls += 1
        return [
            o for o in self._series.get(symbol.upper(), [])
            if start_date <= o.date <= end_date
        ]


class FailingMarketProvider:
    """Market provider that always raises an exception."""

    def get_price_history(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
    ) -> list[PriceObservation]:
        raise ConnectionError("Network unavailable")


@pytest.fixture
def deterministic_provider(scenario_a_series) -> DeterministicMarketProvider:
    """Provide a provider serving the scenario A series for TEST."""
    return DeterministicMarketProvider({"TEST": scenario_a_series})


@pytest.fixture
def failing_provider() -> FailingMarketProvider:
    """Provide a market provider that always fails."""
    return FailingMarketProvider()


@pytest.fixture
def market_provider() -> StubMarketDataProvider:
    """Provide stub MarketDataProvider with fixed seed."""
    return StubMarketDataProvider(seed=42)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def market_data_service(deterministic_provider) -> MarketDataService:
    """Provide MarketDataService with deterministic provider."""
    return MarketDataService(
        provider=deterministic_provider,
        cache_ttl_seconds=60,
    )


@pytest.fixture
def analysis_service(market_data_service) -> AnalysisService:
    """Provide AnalysisService."""
    return AnalysisService(market_data_service=market_data_service)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(market_data_service) -> TestClient:
    """Provide FastAPI test client backed by the deterministic provider."""
    reset_settings()
    app.dependency_overrides[get_market_data_service] = lambda: market_data_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"


def assert_ledger_invariants(ledger: list[LedgerEntry]) -> None:
    """Assert ordering, monotonic totals and value consistency of a ledger."""
    for previous, entry in zip(ledger, ledger[1:]):
        assert entry.date > previous.date
        assert entry.total_shares >= previous.total_shares
        assert entry.cumulative_dividends >= previous.cumulative_dividends
    for entry in ledger:
        expected = (entry.total_shares * entry.price).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        assert entry.current_value == expected
