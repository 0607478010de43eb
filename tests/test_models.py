"""
Tests for input records.
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from portfolio_tracker.models import Expense, Frequency, IncomeStream, PropertySnapshot


class TestRecords:
    """Test parsing of storage-layer records."""

    def test_camel_case_keys(self):
        """Test records accept the storage layer's camelCase keys."""
        stream = IncomeStream.model_validate(
            {
                "amount": "2800.00",
                "frequency": "MONTHLY",
                "startDate": "2024-06-01",
                "endDate": "2024-08-31",
                "isRecurring": True,
            }
        )
        assert stream.amount == Decimal("2800.00")
        assert stream.frequency is Frequency.MONTHLY
        assert stream.start_date == date(2024, 6, 1)
        assert stream.end_date == date(2024, 8, 31)

    def test_snake_case_keys(self):
        """Test records accept snake_case field names."""
        expense = Expense(amount=Decimal("500"), date=date(2024, 3, 1), recurring=True)
        assert expense.recurring is True

    def test_unknown_frequency_kept_as_string(self):
        """Test unknown frequencies are kept rather than rejected."""
        stream = IncomeStream(
            amount=Decimal("100"), frequency="WEEKLY", start_date=date(2024, 1, 1)
        )
        assert stream.frequency == "WEEKLY"
        assert not isinstance(stream.frequency, Frequency)

    def test_end_date_optional(self):
        """Test streams default to open-ended and recurring."""
        stream = IncomeStream(
            amount=Decimal("100"), frequency=Frequency.ANNUALLY, start_date=date(2024, 1, 1)
        )
        assert stream.end_date is None
        assert stream.is_recurring is True

    def test_property_ledgers_default_empty(self):
        """Test a property without ledgers gets empty lists."""
        prop = PropertySnapshot(
            id="p", name="Empty Lot", current_value=Decimal("0"), cost_basis=Decimal("0")
        )
        assert prop.income_streams == []
        assert prop.expenses == []
        assert prop.mortgages == []

    def test_invalid_amount_rejected(self):
        """Test non-numeric amounts fail validation."""
        with pytest.raises(ValidationError):
            Expense(amount="not a number", date=date(2024, 1, 1))
