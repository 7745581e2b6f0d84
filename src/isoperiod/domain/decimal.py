"""Fixed-point decimal parsing for period field numbers.

Values are scaled by 1000 so that fractional seconds survive without
floating-point error. Only the first fractional digit is kept; the rest
is truncated, never rounded.
"""

from __future__ import annotations

import re

from isoperiod.domain.errors import ParseErrorKind, PeriodParseError

SCALE = 1000
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
# Digits in INT64_MIN, the longest 64-bit magnitude.
INT64_DIGITS = 19

_WHOLE_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+(?:[.,][0-9]*)?")


def _to_int64(digits: str, designator: str, text: str) -> int:
    # int() refuses digit strings longer than sys.get_int_max_str_digits().
    magnitude = digits.lstrip("+-").lstrip("0") or "0"
    if len(magnitude) > INT64_DIGITS:
        raise PeriodParseError(
            ParseErrorKind.MALFORMED_FIELD_NUMBER, text, designator=designator
        )
    value = -int(magnitude, 10) if digits.startswith("-") else int(magnitude, 10)
    if not INT64_MIN <= value <= INT64_MAX:
        raise PeriodParseError(
            ParseErrorKind.MALFORMED_FIELD_NUMBER, text, designator=designator
        )
    return value


def parse_whole(number: str, designator: str, text: str) -> int:
    """Parse a whole-unit field number such as ``"12"`` or ``"-3"``.

    Raises:
        PeriodParseError: ``MALFORMED_FIELD_NUMBER`` if *number* is not an
            optionally signed run of ASCII digits within the 64-bit range.
    """
    if _WHOLE_PATTERN.fullmatch(number) is None:
        raise PeriodParseError(
            ParseErrorKind.MALFORMED_FIELD_NUMBER, text, designator=designator
        )
    return _to_int64(number, designator, text)


def parse_fixed_point(number: str, designator: str, text: str) -> int:
    """Parse a field number into thousandths.

    Either ``.`` or ``,`` separates the fraction.

    Examples:
        >>> parse_fixed_point("12", "S", "PT12S")
        12000
        >>> parse_fixed_point("1,5", "S", "PT1,5S")
        1500
        >>> parse_fixed_point("1.23456", "S", "PT1.23456S")
        1200

    Raises:
        PeriodParseError: ``MALFORMED_FIELD_NUMBER`` for anything that is not
            digits with an optional fraction, or that overflows 64 bits.
    """
    if _DECIMAL_PATTERN.fullmatch(number) is None:
        raise PeriodParseError(
            ParseErrorKind.MALFORMED_FIELD_NUMBER, text, designator=designator
        )

    dec = number.find(".")
    if dec < 0:
        dec = number.find(",")

    if dec < 0:
        digits = number + "000"
    else:
        fraction = number[dec + 1 : dec + 2]
        digits = number[:dec] + fraction.ljust(3, "0")

    return _to_int64(digits, designator, text)
