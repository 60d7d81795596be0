"""Performance summarizer for DCA ledgers."""

import logging
from decimal import Decimal, DecimalException

from dca_analyzer.core.money import round_money
from dca_analyzer.domain.models import LedgerEntry, PerformanceSummary

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = Decimal("365")
HUNDRED = Decimal("100")
ZERO = Decimal("0")


def summarize(ledger: list[LedgerEntry]) -> PerformanceSummary:
    """
    Reduce a ledger to aggregate return metrics.

    The last entry by date is the terminal state. Elapsed time is measured
    from the first to the last entry in 365-day years; when no time elapsed
    (a single-day ledger) the annualized figure is the plain percentage
    return. A zero total_invested yields zero ratios instead of a division
    error.
    """
    if not ledger:
        return PerformanceSummary.zero()

    entries = sorted(ledger, key=lambda entry: entry.date)
    first, last = entries[0], entries[-1]

    total_invested = last.total_invested
    final_value = last.current_value
    total_return = round_money(final_value - total_invested)

    percentage_return = ZERO
    if total_invested > ZERO:
        percentage_return = round_money(total_return / total_invested * HUNDRED)

    years = Decimal((last.date - first.date).days) / DAYS_PER_YEAR
    if years > ZERO:
        annualized_return = annualize(final_value, total_invested, years, percentage_return)
    else:
        annualized_return = percentage_return

    return PerformanceSummary(
        total_invested=total_invested,
        final_value=final_value,
        total_return=total_return,
        percentage_return=percentage_return,
        annualized_return=annualized_return,
        dividends_received=last.cumulative_dividends or ZERO,
    )


def annualize(
    final_value: Decimal,
    total_invested: Decimal,
    years: Decimal,
    fallback: Decimal,
) -> Decimal:
    """Compound annual growth rate in percent, rounded to cents."""
    if total_invested <= ZERO:
        return ZERO
    try:
        growth = (final_value / total_invested) ** (1 / years)
        return round_money((growth - 1) * HUNDRED)
    except DecimalException:
        logger.warning(
            "CAGR out of range for %s/%s over %s years, using percentage return",
            final_value,
            total_invested,
            years,
        )
        return fallback
