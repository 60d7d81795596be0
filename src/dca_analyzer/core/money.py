"""Decimal coercion and rounding helpers."""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional

CENT = Decimal("0.01")
SHARE_QUANTUM = Decimal("0.000001")


def to_decimal(value: Any, default: Optional[Decimal] = None) -> Decimal:
    """Coerce str/int/float/Decimal input to Decimal (floats via their repr)."""
    if value is None:
        if default is None:
            raise TypeError("value is required")
        return default
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    """Round to cents, half up."""
    # quantize fails once the integer part exceeds the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_shares(value: Decimal) -> Decimal:
    """Round a share quantity to 6 decimal places, half up."""
    return value.quantize(SHARE_QUANTUM, rounding=ROUND_HALF_UP)
