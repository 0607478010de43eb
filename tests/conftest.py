"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os
from datetime import date
from decimal import Decimal

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio_tracker.models import (
    Expense,
    Frequency,
    IncomeStream,
    InvestorPortfolio,
    Mortgage,
    PropertySnapshot,
)

# All date-dependent tests evaluate against this fixed date
TODAY = date(2024, 12, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def rental_property():
    """Single-family rental used across the metrics tests."""
    return PropertySnapshot(
        id="prop-1",
        name="Maple Street Duplex",
        address="12 Maple St",
        current_value=Decimal("450000"),
        cost_basis=Decimal("380000"),
        purchase_date=date(2020, 3, 15),
        income_streams=[
            IncomeStream(
                name="Rent",
                amount=Decimal("2800"),
                frequency=Frequency.MONTHLY,
                start_date=date(2020, 4, 1),
                is_recurring=True,
            ),
        ],
        expenses=[
            Expense(amount=Decimal("625"), date=date(2020, 4, 1), recurring=True, category="tax"),
            Expense(amount=Decimal("125"), date=date(2020, 4, 1), recurring=True, category="insurance"),
            Expense(amount=Decimal("150"), date=date(2020, 4, 1), recurring=True, category="management"),
        ],
        mortgages=[
            Mortgage(
                lender="First National",
                original_amount=Decimal("304000"),
                current_balance=Decimal("285000"),
                interest_rate=Decimal("3.25"),
                term_months=360,
                start_date=date(2020, 3, 15),
                monthly_payment=Decimal("1850"),
            ),
        ],
    )


@pytest.fixture
def investor_portfolio(rental_property):
    return InvestorPortfolio(
        investor_id="inv-1",
        name="Sarah Thompson",
        properties=[rental_property],
    )
