"""ISO-8601 text output for periods.

The zero period is always written ``P0D``. Zero-valued fields are left
out, and the time designator appears only when a time field is non-zero.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isoperiod.domain.decimal import SCALE

if TYPE_CHECKING:
    from isoperiod.domain.period import Period

ZERO_TEXT = "P0D"


def format_fixed_point(value: int) -> str:
    """Render a thousandths value as a decimal without trailing zeros.

    Examples:
        >>> format_fixed_point(1500)
        '1.5'
        >>> format_fixed_point(-2000)
        '-2'
    """
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), SCALE)
    if not fraction:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{fraction:03d}".rstrip("0")


def format_period(period: Period) -> str:
    """Return the ISO-8601 text for *period*, e.g. ``"-P1Y2MT3.5S"``.

    Seconds are written with every significant thousandth, so
    ``Period(seconds=1001)`` gives ``"PT1.001S"``. Parsing keeps only one
    fractional digit, so that text reads back as 1000. Parsed periods
    always survive format then parse unchanged; periods built directly
    with sub-tenth seconds do not.
    """
    if period.is_zero:
        return ZERO_TEXT

    parts = ["-P" if period.negative else "P"]
    for value, marker in ((period.years, "Y"), (period.months, "M"), (period.days, "D")):
        if value:
            parts.append(f"{value}{marker}")

    if period.hours or period.minutes or period.seconds:
        parts.append("T")
        if period.hours:
            parts.append(f"{period.hours}H")
        if period.minutes:
            parts.append(f"{period.minutes}M")
        if period.seconds:
            parts.append(f"{format_fixed_point(period.seconds)}S")

    return "".join(parts)
