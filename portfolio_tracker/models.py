"""
Input records for the analytics engine.

These mirror the rows the storage layer keeps for each property. Keys may be
given in snake_case or in the camelCase used by the storage layer.
"""

import enum
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class Frequency(str, enum.Enum):
    """How often an income stream pays out."""

    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    ANNUALLY = "ANNUALLY"
    ONE_TIME = "ONE_TIME"


class Record(BaseModel):
    """Base for all records handed over by the storage layer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IncomeStream(Record):
    """Rent or other income attached to a property."""

    amount: Decimal
    # Unknown values are kept as raw strings and normalize to zero
    frequency: Union[Frequency, str]
    start_date: date
    end_date: Optional[date] = None
    is_recurring: bool = True
    name: Optional[str] = None

    @field_validator("frequency", mode="before")
    @classmethod
    def _coerce_frequency(cls, value):
        if isinstance(value, Frequency):
            return value
        try:
            return Frequency(value)
        except ValueError:
            logger.warning(
                "Unknown income frequency %r; it will count as 0 per month", value
            )
            return value


class Expense(Record):
    """
    Operating expense attached to a property.

    For recurring expenses `date` marks when the expense started; there is
    no end date.
    """

    amount: Decimal
    date: date
    recurring: bool = False
    category: Optional[str] = None
    description: Optional[str] = None


class Mortgage(Record):
    """Loan secured by a property."""

    original_amount: Decimal
    current_balance: Decimal
    interest_rate: Decimal  # Percent, e.g. 6.5
    term_months: int
    start_date: date
    monthly_payment: Decimal
    lender: Optional[str] = None
    loan_type: Optional[str] = None


class PropertySnapshot(Record):
    """A property with all of its ledgers."""

    id: str
    name: str
    current_value: Decimal
    cost_basis: Decimal
    purchase_date: Optional[date] = None
    address: Optional[str] = None
    income_streams: List[IncomeStream] = Field(default_factory=list)
    expenses: List[Expense] = Field(default_factory=list)
    mortgages: List[Mortgage] = Field(default_factory=list)


class InvestorPortfolio(Record):
    """All properties owned by one investor."""

    investor_id: str
    name: Optional[str] = None
    properties: List[PropertySnapshot] = Field(default_factory=list)
