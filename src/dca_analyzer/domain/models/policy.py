"""Investment policy domain model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from dca_analyzer.core.calendar import Frequency, parse_date
from dca_analyzer.core.exceptions import ValidationError
from dca_analyzer.core.money import to_decimal


@dataclass
class InvestmentPolicy:
    """
    Parameters of a dollar-cost averaging run.

    ``amount`` is contributed on every cadence tick between start_date and
    end_date. When ``reinvest_dividends`` is set, dividend cash buys more
    shares on the payout day. ``reinvested_dividends_as_principal`` controls
    whether that reinvested cash counts toward total_invested.
    """

    symbol: str
    start_date: date
    end_date: date
    frequency: Frequency
    amount: Decimal
    reinvest_dividends: bool = False
    reinvested_dividends_as_principal: bool = True

    def __post_init__(self) -> None:
        self.symbol = self.symbol.strip().upper()
        self.start_date = parse_date(self.start_date)
        self.end_date = parse_date(self.end_date)
        if isinstance(self.frequency, str):
            self.frequency = Frequency(self.frequency.lower())
        self.amount = to_decimal(self.amount)

    @property
    def is_valid(self) -> bool:
        """Return True if the policy satisfies its preconditions."""
        return (
            bool(self.symbol)
            and self.amount > Decimal("0")
            and self.start_date <= self.end_date
        )

    def validate(self) -> None:
        """Raise ValidationError if the policy violates a precondition."""
        if not self.symbol:
            raise ValidationError("Symbol is required")
        if self.amount <= Decimal("0"):
            raise ValidationError(f"Investment amount must be positive, got {self.amount}")
        if self.start_date > self.end_date:
            raise ValidationError(
                f"Start date {self.start_date.isoformat()} is after "
                f"end date {self.end_date.isoformat()}"
            )
