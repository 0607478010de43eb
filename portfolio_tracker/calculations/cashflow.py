"""
Cash Flow Calculations

Builds the trailing month-by-month cash flow series shown on the property
and portfolio charts, and the point-in-time monthly cash flow for today.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from dateutil.relativedelta import relativedelta

from portfolio_tracker.calculations.frequency import monthly_equivalent
from portfolio_tracker.calculations.rounding import ZERO, round_money
from portfolio_tracker.config import get_settings
from portfolio_tracker.models import Expense, IncomeStream, Mortgage

logger = logging.getLogger(__name__)


@dataclass
class MonthlyCashFlow:
    """One month of the cash flow series."""

    month: str  # Short month name, e.g. "Jan"
    income: Decimal
    expenses: Decimal
    net: Decimal


@dataclass
class CurrentCashFlow:
    """Cash flow for the current month."""

    income: Decimal
    expenses: Decimal
    net_cash_flow: Decimal


def is_active(stream: IncomeStream, period_start: date, period_end: date) -> bool:
    """Check whether an income stream overlaps [period_start, period_end]."""
    return stream.start_date <= period_end and (
        stream.end_date is None or stream.end_date >= period_start
    )


def mortgage_payment_expenses(mortgages: Iterable[Mortgage]) -> List[Expense]:
    """Treat each mortgage payment as a recurring expense from its start date."""
    return [
        Expense(
            amount=m.monthly_payment,
            date=m.start_date,
            recurring=True,
            category="mortgage",
            description=m.lender,
        )
        for m in mortgages
    ]


def _with_mortgages(
    expenses: Iterable[Expense], mortgages: Optional[Iterable[Mortgage]]
) -> List[Expense]:
    expenses = list(expenses)
    if mortgages:
        expenses.extend(mortgage_payment_expenses(mortgages))
    return expenses


def calculate_month_income(
    income_streams: Iterable[IncomeStream], month_start: date, month_end: date
) -> Decimal:
    """
    Sum monthly-equivalent income for streams active during the month.

    Only recurring streams count. A non-recurring stream contributes nothing,
    even in the month it occurs.
    """
    return sum(
        (
            monthly_equivalent(s.amount, s.frequency)
            for s in income_streams
            if s.is_recurring and is_active(s, month_start, month_end)
        ),
        ZERO,
    )


def calculate_month_expenses(
    expenses: Iterable[Expense], month_start: date, month_end: date
) -> Decimal:
    """
    Sum expenses for a month.

    A recurring expense counts its full amount in every month from its
    start date onward. A one-time expense counts only in its own month.
    """
    total = ZERO
    for expense in expenses:
        if expense.recurring:
            if expense.date <= month_end:
                total += expense.amount
        elif month_start <= expense.date <= month_end:
            total += expense.amount
    return total


def calculate_recurring_expenses(expenses: Iterable[Expense], as_of: date) -> Decimal:
    """Sum recurring expenses that started on or before `as_of`."""
    return sum(
        (e.amount for e in expenses if e.recurring and e.date <= as_of), ZERO
    )


def generate_cash_flow_series(
    income_streams: Iterable[IncomeStream],
    expenses: Iterable[Expense],
    months_back: Optional[int] = None,
    today: Optional[date] = None,
    mortgages: Optional[Iterable[Mortgage]] = None,
) -> List[MonthlyCashFlow]:
    """
    Generate monthly cash flows for the trailing window ending this month.

    Args:
        income_streams: Income streams to include
        expenses: Expense records to include
        months_back: Number of months in the window (defaults to settings)
        today: Evaluation date (defaults to the current date)
        mortgages: If given, mortgage payments are added as recurring expenses

    Returns:
        Exactly `months_back` entries, oldest first
    """
    if months_back is None:
        months_back = get_settings().default_months_back
    if today is None:
        today = date.today()

    income_streams = list(income_streams)
    expenses = _with_mortgages(expenses, mortgages)
    current_month = today.replace(day=1)

    series = []
    for i in range(months_back - 1, -1, -1):
        month_start = current_month - relativedelta(months=i)
        month_end = month_start + relativedelta(months=1, days=-1)

        income = calculate_month_income(income_streams, month_start, month_end)
        month_expenses = calculate_month_expenses(expenses, month_start, month_end)

        series.append(
            MonthlyCashFlow(
                month=month_start.strftime("%b"),
                income=round_money(income),
                expenses=round_money(month_expenses),
                net=round_money(income - month_expenses),
            )
        )

    logger.debug(
        "Generated %d-month cash flow series from %d income streams and %d expenses",
        len(series),
        len(income_streams),
        len(expenses),
    )
    return series


def calculate_current_cash_flow(
    income_streams: Iterable[IncomeStream],
    expenses: Iterable[Expense],
    today: Optional[date] = None,
    mortgages: Optional[Iterable[Mortgage]] = None,
) -> CurrentCashFlow:
    """
    Calculate this month's recurring income, expenses and net cash flow.

    Income counts recurring streams active on `today`. Expenses count
    recurring expenses that started on or before `today`.
    """
    if today is None:
        today = date.today()

    income = calculate_month_income(income_streams, today, today)
    total_expenses = calculate_recurring_expenses(
        _with_mortgages(expenses, mortgages), today
    )

    return CurrentCashFlow(
        income=round_money(income),
        expenses=round_money(total_expenses),
        net_cash_flow=round_money(income - total_expenses),
    )
