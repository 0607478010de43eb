"""
Decimal rounding helpers.

Sums are carried at full precision and rounded only when a result is built.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from portfolio_tracker.config import get_settings

ZERO = Decimal("0")
HUNDRED = Decimal("100")

Number = Union[Decimal, int, str]


def _quantize(value: Number, places: int) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def round_money(value: Number) -> Decimal:
    """Round a currency amount, half away from zero (12345.678 -> 12345.68)."""
    return _quantize(value, get_settings().money_decimal_places)


def round_percent(value: Number) -> Decimal:
    """Round a percentage."""
    return _quantize(value, get_settings().percent_decimal_places)


def percent_of(numerator: Decimal, denominator: Decimal) -> Decimal:
    """
    Calculate numerator / denominator * 100.

    Returns 0 when the denominator is not positive.
    """
    if denominator > 0:
        return numerator / denominator * HUNDRED
    return ZERO
