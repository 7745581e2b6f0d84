"""Normalisation — the single carry between months and years.

Whole multiples of 12 months become years. Nothing else is ever carried:
a day is not a fixed fraction of a month under any calendar, and an hour
is not a fixed fraction of a day across DST changes, so days, hours,
minutes and seconds pass through untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isoperiod.domain.decimal import INT64_MAX, INT64_MIN

if TYPE_CHECKING:
    from isoperiod.domain.period import Period

MONTHS_PER_YEAR = 12


def normalise_months(years: int, months: int) -> tuple[int, int]:
    """Fold complete multiples of 12 months into years.

    Division truncates toward zero and the remainder keeps the sign of the
    month total, so ``years * 12 + months`` is preserved exactly.

    Examples:
        >>> normalise_months(0, 24)
        (2, 0)
        >>> normalise_months(-1, 13)
        (0, 1)
        >>> normalise_months(0, -14)
        (-1, -2)
    """
    total = years * MONTHS_PER_YEAR + months
    quotient, remainder = divmod(abs(total), MONTHS_PER_YEAR)
    if total < 0:
        return -quotient, -remainder
    return quotient, remainder


def normalise(period: Period) -> Period:
    """Return *period* with months folded into years.

    Raises:
        OverflowError: If the folded year count leaves the 64-bit range.
    """
    years, months = normalise_months(period.years, period.months)
    if not INT64_MIN <= years <= INT64_MAX:
        msg = f"normalised years out of range: {years}"
        raise OverflowError(msg)
    return period.replace(years=years, months=months)
