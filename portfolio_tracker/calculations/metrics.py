"""
Portfolio and Property Metrics

Valuation and yield metrics for each property and portfolio totals for an
investor. Every ratio with a zero (or negative) denominator resolves to 0.

Percentages are expressed as percent (5.0667 means 5.0667%).
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, Optional

from portfolio_tracker.calculations.cashflow import (
    calculate_month_income,
    calculate_recurring_expenses,
)
from portfolio_tracker.calculations.frequency import monthly_equivalent
from portfolio_tracker.calculations.mortgage import (
    total_current_balance,
    total_monthly_payment,
    total_original_amount,
)
from portfolio_tracker.calculations.rounding import (
    ZERO,
    percent_of,
    round_money,
    round_percent,
)
from portfolio_tracker.models import IncomeStream, PropertySnapshot

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass
class PropertyMetrics:
    """Yield and leverage metrics for a single property."""

    property_id: str
    monthly_rent: Decimal
    monthly_expenses: Decimal  # Operating only, excludes mortgage payments
    monthly_mortgage_payment: Decimal
    noi: Decimal  # Annual
    cap_rate: Decimal
    total_mortgage_debt: Decimal
    original_loan_amount: Decimal
    cash_invested: Decimal
    annual_cash_flow: Decimal
    coc_return: Decimal
    ltv: Decimal
    equity: Decimal
    appreciation: Decimal
    appreciation_percent: Decimal
    # Not calculated; None means unavailable rather than a 0% return
    irr: Optional[Decimal] = None


@dataclass
class PortfolioMetrics:
    """Totals across all properties of one investor."""

    properties_count: int
    total_value: Decimal
    total_cost_basis: Decimal
    total_debt: Decimal
    total_equity: Decimal
    total_original_loans: Decimal
    total_income_earned: Decimal
    property_appreciation: Decimal
    appreciation_percent: Decimal
    money_in: Decimal
    total_roi: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    monthly_mortgage_payments: Decimal
    net_monthly_cash_flow: Decimal
    average_ltv: Decimal
    properties: Dict[str, PropertyMetrics] = field(default_factory=dict)


@dataclass
class _PropertyFigures:
    """Unrounded per-property figures shared by the property and portfolio paths."""

    monthly_rent: Decimal
    monthly_expenses: Decimal
    monthly_mortgage_payment: Decimal
    total_mortgage_debt: Decimal
    original_loan_amount: Decimal

    def noi(self) -> Decimal:
        return (self.monthly_rent - self.monthly_expenses) * MONTHS_PER_YEAR

    def annual_cash_flow(self) -> Decimal:
        return (
            self.monthly_rent - self.monthly_expenses - self.monthly_mortgage_payment
        ) * MONTHS_PER_YEAR


def _property_figures(prop: PropertySnapshot) -> _PropertyFigures:
    return _PropertyFigures(
        monthly_rent=sum(
            (
                monthly_equivalent(s.amount, s.frequency)
                for s in prop.income_streams
                if s.is_recurring
            ),
            ZERO,
        ),
        monthly_expenses=sum(
            (e.amount for e in prop.expenses if e.recurring), ZERO
        ),
        monthly_mortgage_payment=total_monthly_payment(prop.mortgages),
        total_mortgage_debt=total_current_balance(prop.mortgages),
        original_loan_amount=total_original_amount(prop.mortgages),
    )


def calculate_property_metrics(prop: PropertySnapshot) -> PropertyMetrics:
    """
    Calculate NOI, cap rate, cash-on-cash return and LTV for a property.

    NOI excludes debt service. Cash invested is cost basis less the original
    loan amount and may be negative; cash-on-cash is 0 unless it is positive.

    Args:
        prop: Property with its income streams, expenses and mortgages

    Returns:
        PropertyMetrics with money rounded to cents
    """
    figures = _property_figures(prop)
    noi = figures.noi()
    annual_cash_flow = figures.annual_cash_flow()
    cash_invested = prop.cost_basis - figures.original_loan_amount
    appreciation = prop.current_value - prop.cost_basis

    return PropertyMetrics(
        property_id=prop.id,
        monthly_rent=round_money(figures.monthly_rent),
        monthly_expenses=round_money(figures.monthly_expenses),
        monthly_mortgage_payment=round_money(figures.monthly_mortgage_payment),
        noi=round_money(noi),
        cap_rate=round_percent(percent_of(noi, prop.current_value)),
        total_mortgage_debt=round_money(figures.total_mortgage_debt),
        original_loan_amount=round_money(figures.original_loan_amount),
        cash_invested=round_money(cash_invested),
        annual_cash_flow=round_money(annual_cash_flow),
        coc_return=round_percent(percent_of(annual_cash_flow, cash_invested)),
        ltv=round_percent(percent_of(figures.total_mortgage_debt, prop.current_value)),
        equity=round_money(prop.current_value - figures.total_mortgage_debt),
        appreciation=round_money(appreciation),
        appreciation_percent=round_percent(percent_of(appreciation, prop.cost_basis)),
    )


def months_between(start: date, end: date) -> int:
    """Count calendar months from start to end, ignoring days. Never negative."""
    return max((end.year - start.year) * 12 + (end.month - start.month), 0)


def calculate_income_earned(
    income_streams: Iterable[IncomeStream], today: Optional[date] = None
) -> Decimal:
    """
    Calculate lifetime income earned by recurring streams up to today.

    Each stream earns its monthly equivalent for every whole calendar month
    between its start date and the earlier of its end date and today.
    Streams that have not started yet earn nothing.
    """
    if today is None:
        today = date.today()

    earned = ZERO
    for stream in income_streams:
        if not stream.is_recurring or stream.start_date > today:
            continue
        end = min(stream.end_date or today, today)
        months = months_between(stream.start_date, end)
        earned += monthly_equivalent(stream.amount, stream.frequency) * months
    return earned


def calculate_portfolio_metrics(
    properties: Iterable[PropertySnapshot], today: Optional[date] = None
) -> PortfolioMetrics:
    """
    Calculate portfolio totals, equity and total ROI for one investor.

    Total ROI is (appreciation + lifetime income earned) / net cash invested,
    where net cash invested is total cost basis less original loans.
    It is a simple cumulative return, not annualized.

    Args:
        properties: The investor's properties
        today: Evaluation date (defaults to the current date)

    Returns:
        PortfolioMetrics including per-property metrics keyed by property id
    """
    if today is None:
        today = date.today()

    properties = list(properties)

    total_value = ZERO
    total_cost_basis = ZERO
    total_debt = ZERO
    total_original_loans = ZERO
    total_income_earned = ZERO
    monthly_income = ZERO
    monthly_expenses = ZERO
    monthly_mortgage_payments = ZERO
    ltv_sum = ZERO
    property_metrics = {}

    for prop in properties:
        figures = _property_figures(prop)

        total_value += prop.current_value
        total_cost_basis += prop.cost_basis
        total_debt += figures.total_mortgage_debt
        total_original_loans += figures.original_loan_amount
        total_income_earned += calculate_income_earned(prop.income_streams, today)
        ltv_sum += percent_of(figures.total_mortgage_debt, prop.current_value)

        # Current month: only streams active today and expenses already started
        monthly_income += calculate_month_income(prop.income_streams, today, today)
        monthly_expenses += calculate_recurring_expenses(prop.expenses, today)
        monthly_mortgage_payments += figures.monthly_mortgage_payment

        property_metrics[prop.id] = calculate_property_metrics(prop)

    property_appreciation = total_value - total_cost_basis
    money_in = total_cost_basis - total_original_loans
    total_roi = percent_of(property_appreciation + total_income_earned, money_in)
    average_ltv = ltv_sum / len(properties) if properties else ZERO

    logger.debug(
        "Portfolio of %d properties: value=%s debt=%s roi=%s",
        len(properties),
        total_value,
        total_debt,
        total_roi,
    )

    return PortfolioMetrics(
        properties_count=len(properties),
        total_value=round_money(total_value),
        total_cost_basis=round_money(total_cost_basis),
        total_debt=round_money(total_debt),
        total_equity=round_money(total_value - total_debt),
        total_original_loans=round_money(total_original_loans),
        total_income_earned=round_money(total_income_earned),
        property_appreciation=round_money(property_appreciation),
        appreciation_percent=round_percent(
            percent_of(property_appreciation, total_cost_basis)
        ),
        money_in=round_money(money_in),
        total_roi=round_percent(total_roi),
        monthly_income=round_money(monthly_income),
        monthly_expenses=round_money(monthly_expenses),
        monthly_mortgage_payments=round_money(monthly_mortgage_payments),
        net_monthly_cash_flow=round_money(
            monthly_income - monthly_expenses - monthly_mortgage_payments
        ),
        average_ltv=round_percent(average_ltv),
        properties=property_metrics,
    )
