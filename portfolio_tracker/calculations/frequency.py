"""
Frequency Normalization

Converts periodic amounts to their monthly equivalent so income of
differing frequencies can be compared and summed.
"""

import logging
from decimal import Decimal
from typing import Union

from portfolio_tracker.models import Frequency

logger = logging.getLogger(__name__)

MONTHS_PER_PERIOD = {
    Frequency.MONTHLY: Decimal("1"),
    Frequency.QUARTERLY: Decimal("3"),
    Frequency.ANNUALLY: Decimal("12"),
}


def monthly_equivalent(amount: Decimal, frequency: Union[Frequency, str]) -> Decimal:
    """
    Calculate the monthly equivalent of a periodic amount.

    MONTHLY -> amount, QUARTERLY -> amount / 3, ANNUALLY -> amount / 12.
    ONE_TIME amounts have no monthly equivalent and return 0. Unknown
    frequencies also return 0; IncomeStream warns about them once when the
    record is built.

    Args:
        amount: Nominal amount paid each period
        frequency: Payment frequency

    Returns:
        Monthly equivalent amount (unrounded)
    """
    try:
        frequency = Frequency(frequency)
    except ValueError:
        logger.debug("Unknown income frequency %r; counting it as 0", frequency)
        return Decimal("0")

    if frequency is Frequency.ONE_TIME:
        return Decimal("0")

    return Decimal(amount) / MONTHS_PER_PERIOD[frequency]
