"""
Tests for mortgage calculations.
"""

from datetime import date
from decimal import Decimal

from portfolio_tracker.calculations.mortgage import (
    calculate_mortgage_progress,
    total_current_balance,
    total_monthly_payment,
    total_original_amount,
)
from portfolio_tracker.models import Mortgage


def _mortgage(start, term_months=360):
    return Mortgage(
        original_amount=Decimal("300000"),
        current_balance=Decimal("295000"),
        interest_rate=Decimal("6.875"),
        term_months=term_months,
        start_date=start,
        monthly_payment=Decimal("1970.79"),
    )


class TestMortgageProgress:
    """Test elapsed/remaining term calculations."""

    def test_progress_mid_term(self, today):
        """Test progress partway through the term."""
        progress = calculate_mortgage_progress(_mortgage(date(2024, 1, 1)), today)
        # 349 days -> 11 whole 30-day months
        assert progress.months_elapsed == 11
        assert progress.remaining_months == 349
        assert progress.progress_percent == Decimal("3.0556")

    def test_future_start(self, today):
        """Test a mortgage that has not started yet."""
        progress = calculate_mortgage_progress(_mortgage(date(2025, 3, 1)), today)
        assert progress.months_elapsed == 0
        assert progress.remaining_months == 360
        assert progress.progress_percent == 0

    def test_past_term_capped(self, today):
        """Test progress is capped at 100%."""
        progress = calculate_mortgage_progress(_mortgage(date(2010, 1, 1), 60), today)
        assert progress.remaining_months == 0
        assert progress.progress_percent == Decimal("100.0000")

    def test_zero_term(self, today):
        """Test a zero-month term gives zero progress."""
        progress = calculate_mortgage_progress(_mortgage(date(2020, 1, 1), 0), today)
        assert progress.progress_percent == 0


class TestMortgageTotals:
    """Test debt totals."""

    def test_totals(self):
        """Test debt totals across mortgages."""
        mortgages = [_mortgage(date(2020, 1, 1)), _mortgage(date(2022, 1, 1))]
        assert total_current_balance(mortgages) == Decimal("590000")
        assert total_original_amount(mortgages) == Decimal("600000")
        assert total_monthly_payment(mortgages) == Decimal("3941.58")

    def test_empty(self):
        """Test totals for no mortgages are zero."""
        assert total_current_balance([]) == 0
        assert total_original_amount([]) == 0
        assert total_monthly_payment([]) == 0
