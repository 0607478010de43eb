"""
Report Data

Assembles the tables behind the investor portfolio report and the manager
dashboard. Rendering (PDF, HTML) is left to the caller.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from portfolio_tracker.calculations.frequency import monthly_equivalent
from portfolio_tracker.calculations.metrics import (
    PortfolioMetrics,
    calculate_portfolio_metrics,
)
from portfolio_tracker.calculations.rounding import ZERO, round_money, round_percent
from portfolio_tracker.models import InvestorPortfolio


@dataclass
class PropertyRow:
    property_id: str
    name: str
    address: Optional[str]
    purchase_date: Optional[date]
    current_value: Decimal
    cost_basis: Decimal
    appreciation: Decimal
    appreciation_percent: Decimal
    debt: Decimal
    equity: Decimal


@dataclass
class IncomeRow:
    property_name: str
    stream_name: Optional[str]
    frequency: str
    amount: Decimal
    monthly_amount: Decimal


@dataclass
class MortgageRow:
    property_name: str
    lender: Optional[str]
    current_balance: Decimal
    interest_rate: Decimal
    monthly_payment: Decimal


@dataclass
class PortfolioReport:
    """Everything the portfolio report exporter lays out."""

    generated_on: date
    investor: str
    summary: PortfolioMetrics
    property_rows: List[PropertyRow] = field(default_factory=list)
    income_rows: List[IncomeRow] = field(default_factory=list)
    mortgage_rows: List[MortgageRow] = field(default_factory=list)


@dataclass
class InvestorSummary:
    investor_id: str
    name: Optional[str]
    properties_count: int
    total_value: Decimal
    total_equity: Decimal
    monthly_income: Decimal
    total_roi: Decimal
    average_ltv: Decimal


@dataclass
class ManagerOverview:
    """Totals across all investors a manager oversees."""

    total_investors: int
    total_portfolio_value: Decimal
    total_monthly_income: Decimal
    total_properties: int
    average_roi: Decimal
    investors: List[InvestorSummary] = field(default_factory=list)


def build_portfolio_report(
    portfolio: InvestorPortfolio, today: Optional[date] = None
) -> PortfolioReport:
    """
    Build the data for an investor's portfolio report.

    Property rows follow the order of `portfolio.properties`. Income rows list
    recurring streams only.
    """
    if today is None:
        today = date.today()

    summary = calculate_portfolio_metrics(portfolio.properties, today)
    report = PortfolioReport(
        generated_on=today,
        investor=portfolio.name or portfolio.investor_id,
        summary=summary,
    )

    for prop in portfolio.properties:
        metrics = summary.properties[prop.id]
        report.property_rows.append(
            PropertyRow(
                property_id=prop.id,
                name=prop.name,
                address=prop.address,
                purchase_date=prop.purchase_date,
                current_value=round_money(prop.current_value),
                cost_basis=round_money(prop.cost_basis),
                appreciation=metrics.appreciation,
                appreciation_percent=metrics.appreciation_percent,
                debt=metrics.total_mortgage_debt,
                equity=metrics.equity,
            )
        )

        for stream in prop.income_streams:
            if not stream.is_recurring:
                continue
            report.income_rows.append(
                IncomeRow(
                    property_name=prop.name,
                    stream_name=stream.name,
                    frequency=getattr(stream.frequency, "value", stream.frequency),
                    amount=round_money(stream.amount),
                    monthly_amount=round_money(
                        monthly_equivalent(stream.amount, stream.frequency)
                    ),
                )
            )

        for m in prop.mortgages:
            report.mortgage_rows.append(
                MortgageRow(
                    property_name=prop.name,
                    lender=m.lender,
                    current_balance=round_money(m.current_balance),
                    interest_rate=m.interest_rate,
                    monthly_payment=round_money(m.monthly_payment),
                )
            )

    return report


def summarize_investors(
    portfolios: Iterable[InvestorPortfolio], today: Optional[date] = None
) -> ManagerOverview:
    """
    Summarize every investor's portfolio for the manager dashboard.

    Average ROI is the plain mean of each investor's total ROI.
    """
    if today is None:
        today = date.today()

    investors = []
    for portfolio in portfolios:
        metrics = calculate_portfolio_metrics(portfolio.properties, today)
        investors.append(
            InvestorSummary(
                investor_id=portfolio.investor_id,
                name=portfolio.name,
                properties_count=metrics.properties_count,
                total_value=metrics.total_value,
                total_equity=metrics.total_equity,
                monthly_income=metrics.monthly_income,
                total_roi=metrics.total_roi,
                average_ltv=metrics.average_ltv,
            )
        )

    if investors:
        average_roi = sum((i.total_roi for i in investors), ZERO) / len(investors)
    else:
        average_roi = ZERO

    return ManagerOverview(
        total_investors=len(investors),
        total_portfolio_value=sum((i.total_value for i in investors), ZERO),
        total_monthly_income=sum((i.monthly_income for i in investors), ZERO),
        total_properties=sum(i.properties_count for i in investors),
        average_roi=round_percent(average_roi),
        investors=investors,
    )
