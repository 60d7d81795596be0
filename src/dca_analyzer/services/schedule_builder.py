"""Schedule builder: turns a price series and a policy into a DCA ledger.

The ledger is produced in two passes. The first pass walks the contribution
cadence and emits one immutable purchase record per candidate date that has a
price. The second pass folds purchases and dividend payouts together in date
order, carrying the running totals forward and emitting a new LedgerEntry per
date. Nothing emitted by either pass is modified afterwards.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from dca_analyzer.core.calendar import generate_dates
from dca_analyzer.core.money import round_money, round_shares
from dca_analyzer.domain.models import InvestmentPolicy, LedgerEntry, PriceObservation

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass(frozen=True)
class Purchase:
    """A scheduled contribution matched to a trading day's price."""

    date: date
    price: Decimal
    amount: Decimal
    shares: Decimal


@dataclass(frozen=True)
class DividendEvent:
    """A per-share dividend paid on a trading day."""

    date: date
    price: Decimal
    per_share: Decimal


def normalize_observations(
    observations: Iterable[PriceObservation],
) -> dict[date, PriceObservation]:
    """
    Index observations by date in ascending order.

    Later observations for the same date replace earlier ones. Observations
    with a non-positive or non-finite (NaN, Infinity) price are dropped.
    """
    by_date: dict[date, PriceObservation] = {}
    for observation in observations:
        if not observation.price.is_finite() or observation.price <= ZERO:
            logger.debug("Dropping observation on %s with price %s", observation.date, observation.price)
            continue
        by_date[observation.date] = observation
    return {day: by_date[day] for day in sorted(by_date)}


def effective_start_date(
    trading_days: Iterable[date],
    start_date: date,
) -> Optional[date]:
    """Return the first trading day on or after start_date, or None."""
    for day in trading_days:
        if day >= start_date:
            return day
    return None


def plan_purchases(
    policy: InvestmentPolicy,
    prices: dict[date, PriceObservation],
    start: date,
) -> list[Purchase]:
    """
    Match cadence dates against available prices.

    Candidate dates without an observation are skipped; no nearby price is
    substituted.
    """
    purchases: list[Purchase] = []
    for day in generate_dates(start, policy.end_date, policy.frequency):
        observation = prices.get(day)
        if observation is None:
            continue
        purchases.append(
            Purchase(
                date=day,
                price=observation.price,
                amount=policy.amount,
                shares=round_shares(policy.amount / observation.price),
            )
        )
    return purchases


def collect_dividends(
    prices: dict[date, PriceObservation],
    start: date,
    end: date,
) -> list[DividendEvent]:
    """Return dividend payouts dated within [start, end]."""
    return [
        DividendEvent(date=day, price=obs.price, per_share=obs.dividend)
        for day, obs in prices.items()
        if obs.pays_dividend and start <= day <= end
    ]


def build_schedule(
    policy: InvestmentPolicy,
    observations: Iterable[PriceObservation],
) -> list[LedgerEntry]:
    """
    Build the chronological DCA ledger for a policy.

    Returns an empty list when the policy is unusable (non-positive amount or
    start after end) or when no observation falls on or after the start date.
    Data anomalies (unsorted input, duplicate dates, missing prices) are
    normalized or skipped rather than raised.
    """
    if policy.amount <= ZERO or policy.start_date > policy.end_date:
        logger.debug("Policy for %s is not usable, returning empty schedule", policy.symbol)
        return []

    prices = normalize_observations(observations)
    start = effective_start_date(prices, policy.start_date)
    if start is None or start > policy.end_date:
        logger.debug("No price data for %s on or after %s", policy.symbol, policy.start_date)
        return []

    purchases = plan_purchases(policy, prices, start)
    dividends = collect_dividends(prices, start, policy.end_date)
    ledger = replay(purchases, dividends, policy)

    logger.debug(
        "Built schedule for %s: %d purchases, %d dividend events, %d entries",
        policy.symbol,
        len(purchases),
        len(dividends),
        len(ledger),
    )
    return ledger


def replay(
    purchases: list[Purchase],
    dividends: list[DividendEvent],
    policy: InvestmentPolicy,
) -> list[LedgerEntry]:
    """
    Fold purchases and dividend payouts into ledger entries, oldest first.

    Shares owned at a payout are the running total before that day's
    activity, so a dividend paid before any purchase is skipped and a same-day
    purchase does not earn that day's dividend. Dividend cash always adds to
    cumulative_dividends; it buys shares only when the policy reinvests, and
    counts toward total_invested only when the policy treats reinvested
    dividends as principal.
    """
    purchases_by_date = {p.date: p for p in purchases}
    dividends_by_date = {d.date: d for d in dividends}

    total_shares = ZERO
    total_invested = ZERO
    cumulative_dividends = ZERO
    ledger: list[LedgerEntry] = []

    for day in sorted(purchases_by_date.keys() | dividends_by_date.keys()):
        purchase = purchases_by_date.get(day)
        event = dividends_by_date.get(day)

        payment = ZERO
        if event is not None:
            payment = round_money(total_shares * event.per_share)
            if payment <= ZERO:
                event = None
                payment = ZERO

        if purchase is None and event is None:
            continue

        price = purchase.price if purchase is not None else event.price
        amount = ZERO
        shares_bought = ZERO
        invested = ZERO

        if purchase is not None:
            amount += purchase.amount
            shares_bought += purchase.shares
            invested += purchase.amount

        if event is not None:
            cumulative_dividends += payment
            if policy.reinvest_dividends:
                amount += payment
                shares_bought += round_shares(payment / price)
                if policy.reinvested_dividends_as_principal:
                    invested += payment

        total_shares += shares_bought
        total_invested += invested

        ledger.append(
            LedgerEntry(
                date=day,
                amount=amount,
                shares_purchased=shares_bought,
                price=price,
                total_shares=total_shares,
                total_invested=total_invested,
                current_value=round_money(total_shares * price),
                dividend=event.per_share if event is not None else ZERO,
                cumulative_dividends=cumulative_dividends,
            )
        )

    ledger.sort(key=lambda entry: entry.date)
    return ledger
