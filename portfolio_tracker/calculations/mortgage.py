"""
Mortgage Calculations

Debt totals and payoff progress for the mortgages on a property.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from portfolio_tracker.calculations.rounding import ZERO, HUNDRED, round_percent
from portfolio_tracker.models import Mortgage

DAYS_PER_MONTH = 30


@dataclass
class MortgageProgress:
    """How far into its term a mortgage is."""

    months_elapsed: int
    remaining_months: int
    progress_percent: Decimal


def total_current_balance(mortgages: Iterable[Mortgage]) -> Decimal:
    """Sum outstanding balances."""
    return sum((m.current_balance for m in mortgages), ZERO)


def total_original_amount(mortgages: Iterable[Mortgage]) -> Decimal:
    """Sum original loan amounts."""
    return sum((m.original_amount for m in mortgages), ZERO)


def total_monthly_payment(mortgages: Iterable[Mortgage]) -> Decimal:
    """Sum monthly payments."""
    return sum((m.monthly_payment for m in mortgages), ZERO)


def calculate_mortgage_progress(
    mortgage: Mortgage, today: Optional[date] = None
) -> MortgageProgress:
    """
    Calculate elapsed and remaining months of a mortgage term.

    Months are counted as whole 30-day blocks since the start date.
    Progress is capped at 100%.
    """
    if today is None:
        today = date.today()

    months_elapsed = max((today - mortgage.start_date).days // DAYS_PER_MONTH, 0)
    remaining_months = max(mortgage.term_months - months_elapsed, 0)

    if mortgage.term_months > 0:
        progress = min(
            Decimal(months_elapsed) / Decimal(mortgage.term_months) * HUNDRED, HUNDRED
        )
    else:
        progress = ZERO

    return MortgageProgress(
        months_elapsed=months_elapsed,
        remaining_months=remaining_months,
        progress_percent=round_percent(progress),
    )
