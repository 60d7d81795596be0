"""Market data domain models."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from dca_analyzer.core.calendar import parse_date
from dca_analyzer.core.money import to_decimal


@dataclass
class PriceObservation:
    """
    One trading day of price history for a symbol.

    Supplied by a market data provider and treated as immutable input.
    A missing, negative or non-finite dividend means no payout on that day.
    """

    date: date
    price: Decimal
    dividend: Decimal = field(default_factory=lambda: Decimal("0"))

    def __post_init__(self) -> None:
        self.date = parse_date(self.date)
        self.price = to_decimal(self.price)
        self.dividend = to_decimal(self.dividend, default=Decimal("0"))
        if not self.dividend.is_finite() or self.dividend < Decimal("0"):
            self.dividend = Decimal("0")

    @property
    def pays_dividend(self) -> bool:
        """Return True if a positive dividend is paid on this day."""
        return self.dividend > Decimal("0")
