"""Stub market data provider for offline/testing use."""

import random
import zlib
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from dca_analyzer.core.calendar import is_weekday
from dca_analyzer.domain.models import PriceObservation


# Starting prices for common symbols; others derive one from the symbol
_STUB_START_PRICES: dict[str, Decimal] = {
    "AAPL": Decimal("185.50"),
    "GOOGL": Decimal("142.75"),
    "MSFT": Decimal("378.25"),
    "AMZN": Decimal("178.50"),
    "TSLA": Decimal("248.75"),
    "NVDA": Decimal("485.25"),
    "META": Decimal("505.50"),
    "SPY": Decimal("485.25"),
    "QQQ": Decimal("418.75"),
    "VTI": Decimal("252.30"),
}

# Months in which the stub pays quarterly dividends
_DIVIDEND_MONTHS = (3, 6, 9, 12)
_PRICE_FLOOR = Decimal("1.00")
_CENT = Decimal("0.01")


class StubMarketDataProvider:
    """
    Stub provider with deterministic fake price history for offline operation.

    Prices follow a seeded random walk with a slight upward drift over
    weekdays. A dividend is paid on the third Friday of each quarter-end month.
    The same (seed, symbol, range) always yields the same series.
    """

    def __init__(self, seed: int = 42, dividend_per_share: Optional[Decimal] = Decimal("0.25")):
        """Initialize with a random seed and quarterly dividend (None or 0 disables dividends)."""
        self._seed = seed
        self._dividend = dividend_per_share or Decimal("0")

    def get_price_history(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
    ) -> list[PriceObservation]:
        """Return a weekday price series for the symbol."""
        upper_symbol = symbol.upper()
        rng = random.Random(self._seed ^ zlib.crc32(upper_symbol.encode("utf-8")))

        price = _STUB_START_PRICES.get(upper_symbol)
        if price is None:
            price = Decimal(str(50 + rng.random() * 200)).quantize(_CENT)

        result: list[PriceObservation] = []
        current = start_date
        while current <= end_date:
            if is_weekday(current):
                change_pct = Decimal(str((rng.random() - 0.48) * 0.04))
                price = max(_PRICE_FLOOR, (price * (1 + change_pct)).quantize(_CENT))
                dividend = self._dividend if _is_dividend_day(current) else Decimal("0")
                result.append(PriceObservation(date=current, price=price, dividend=dividend))
            current += timedelta(days=1)

        return result


def _is_dividend_day(day: date) -> bool:
    """Third Friday of a quarter-end month."""
    return day.month in _DIVIDEND_MONTHS and day.weekday() == 4 and 15 <= day.day <= 21
