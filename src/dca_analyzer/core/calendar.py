"""Calendar utilities for trading-day cadence generation.

All month arithmetic goes through ``dateutil.relativedelta``, which clamps to
the last day of a shorter month (Jan 31 + 1 month -> Feb 28, or Feb 29 in a
leap year). Cadence steps are applied to the previous candidate, so a clamped
or weekend-shifted date carries forward into the next step.
"""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Union

import pytz
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

EASTERN_TZ = pytz.timezone("US/Eastern")

SATURDAY = 5
SUNDAY = 6

DateLike = Union[date, datetime, str]


class Frequency(str, Enum):
    """Contribution cadence."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def today_eastern() -> date:
    """Return the current calendar day in US/Eastern timezone."""
    return now_eastern().date()


def parse_date(value: DateLike) -> date:
    """
    Coerce a date, datetime or ISO date string into a calendar day.

    Any time component is dropped.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.isoparse(value.strip()).date()


def is_weekday(day: date) -> bool:
    """Return True for Monday through Friday."""
    return day.weekday() < SATURDAY


def roll_to_weekday(day: date) -> date:
    """Shift a weekend day forward to the following Monday."""
    if day.weekday() == SATURDAY:
        return day + timedelta(days=2)
    if day.weekday() == SUNDAY:
        return day + timedelta(days=1)
    return day


def add_months(day: date, months: int = 1) -> date:
    """Add calendar months, clamping to the end of shorter months."""
    return day + relativedelta(months=months)


def advance(day: date, frequency: Frequency) -> date:
    """Step one cadence tick forward from ``day``."""
    frequency = Frequency(frequency)
    if frequency == Frequency.DAILY:
        return day + timedelta(days=1)
    if frequency == Frequency.WEEKLY:
        return day + timedelta(weeks=1)
    return add_months(day, 1)


def generate_dates(
    start_date: date,
    end_date: date,
    frequency: Frequency,
) -> list[date]:
    """
    Generate candidate investment dates between start and end (inclusive).

    A weekend start rolls forward to Monday and that Monday becomes the first
    candidate. Weekly and monthly steps that land on a weekend roll forward to
    Monday; daily steps never shift and weekend days are simply not emitted.
    """
    frequency = Frequency(frequency)
    dates: list[date] = []

    current = roll_to_weekday(start_date)
    while current <= end_date:
        if is_weekday(current):
            dates.append(current)

        current = advance(current, frequency)
        if frequency != Frequency.DAILY:
            current = roll_to_weekday(current)

    return dates
