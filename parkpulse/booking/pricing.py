"""Booking cost calculation with fixed half-up rounding to cents."""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from parkpulse.booking.time_window import MINUTES_PER_HOUR, TimeSpan
from parkpulse.config import settings

logger = logging.getLogger(__name__)

Rate = Union[Decimal, float, int, str]

CENTS = Decimal("0.01")
ZERO_COST = Decimal("0.00")


def _to_decimal(value: Rate) -> Decimal:
    # str() first so 7.5 becomes Decimal("7.5"), not its binary expansion
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_cost(rate_per_hour: Rate, span: TimeSpan) -> Decimal:
    """Total cost of ``span`` at ``rate_per_hour``, rounded half-up to cents.

    Never negative: an inverted or zero-length span, or a rate that is not
    a positive number, costs 0.00.
    """
    try:
        rate = _to_decimal(rate_per_hour)
    except (InvalidOperation, ValueError):
        logger.debug("Unparseable rate %r, costing as zero", rate_per_hour)
        return ZERO_COST
    if not rate.is_finite() or rate <= 0:
        return ZERO_COST
    if not span.is_ordered:
        return ZERO_COST

    total = rate * span.duration_minutes / MINUTES_PER_HOUR
    return total.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_cost(amount: Decimal) -> str:
    """Render an amount for display, e.g. ``$40.00``."""
    return f"{settings.marketplace.currency_symbol}{amount.quantize(CENTS, rounding=ROUND_HALF_UP)}"
