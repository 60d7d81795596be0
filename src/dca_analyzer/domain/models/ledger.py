"""Ledger and performance value objects."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LedgerEntry:
    """
    One dated row of a DCA schedule.

    Records the purchase and/or dividend event on ``date`` and the resulting
    cumulative holdings. current_value is always total_shares * price,
    rounded to cents.
    """

    date: date
    amount: Decimal
    shares_purchased: Decimal
    price: Decimal
    total_shares: Decimal
    total_invested: Decimal
    current_value: Decimal
    dividend: Decimal = field(default_factory=lambda: Decimal("0"))
    cumulative_dividends: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass(frozen=True)
class PerformanceSummary:
    """Aggregate return metrics derived from the last ledger entry."""

    total_invested: Decimal
    final_value: Decimal
    total_return: Decimal
    percentage_return: Decimal
    annualized_return: Decimal
    dividends_received: Decimal = field(default_factory=lambda: Decimal("0"))

    @classmethod
    def zero(cls) -> "PerformanceSummary":
        """Summary for an empty ledger."""
        zero = Decimal("0")
        return cls(
            total_invested=zero,
            final_value=zero,
            total_return=zero,
            percentage_return=zero,
            annualized_return=zero,
            dividends_received=zero,
        )
