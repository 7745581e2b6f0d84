"""Period grammar scanner and field extractor.

Grammar::

    period   := sign? "P" datepart? ("T" timepart)?
    datepart := (n "Y")? (n "M")? (n "W")? (n "D")?
    timepart := (n "H")? (n "M")? (n ("."|",") digit* "S")?

Fields are located by searching for each unit marker in a fixed order,
so the scan state is just the text not yet consumed plus whether any
field has matched so far. Each extraction step returns a new state.

The literal ``"P0"`` is the only marker-less spelling of zero.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace

from isoperiod.domain.decimal import INT64_MAX, INT64_MIN, parse_fixed_point, parse_whole
from isoperiod.domain.errors import ParseErrorKind, PeriodParseError
from isoperiod.domain.period import Period

ZERO_LITERAL = "P0"
DAYS_PER_WEEK = 7

NumberParser = Callable[[str, str, str], int]


@dataclass(frozen=True)
class RawPeriod:
    """Field values exactly as scanned, before any normalisation."""

    text: str  # original input, for diagnostics only
    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0  # thousandths
    negative: bool = False

    def to_period(self) -> Period:
        return Period(
            years=self.years,
            months=self.months,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            negative=self.negative,
        )


@dataclass(frozen=True)
class _ScanState:
    text: str
    remaining: str
    matched: bool = False


def _extract(state: _ScanState, marker: str, parse_number: NumberParser) -> tuple[int, _ScanState]:
    """Consume the field terminated by *marker*, if it is present."""
    index = state.remaining.find(marker)
    if index < 0:
        return 0, state
    if index == 0:
        raise PeriodParseError(
            ParseErrorKind.MISSING_FIELD_NUMBER, state.text, designator=marker
        )
    value = parse_number(state.remaining[:index], marker, state.text)
    return value, replace(state, remaining=state.remaining[index + 1 :], matched=True)


def _expect_consumed(state: _ScanState) -> None:
    if state.remaining:
        raise PeriodParseError(
            ParseErrorKind.TRAILING_TEXT, state.text, remainder=state.remaining
        )


def scan(text: str) -> RawPeriod:
    """Split *text* into its raw field values.

    Raises:
        PeriodParseError: On the first grammar violation found.
    """
    if text in ("", "+", "-"):
        raise PeriodParseError(ParseErrorKind.EMPTY_OR_SIGN_ONLY, text)

    if text == ZERO_LITERAL:
        return RawPeriod(text=text)

    negative = text[0] == "-"
    body = text[1:] if text[0] in "+-" else text
    if not body.startswith("P"):
        raise PeriodParseError(ParseErrorKind.MISSING_PERIOD_MARKER, text)

    date_part, has_time, time_part = body[1:].partition("T")
    state = _ScanState(text=text, remaining=time_part)

    hours = minutes = seconds = 0
    if has_time:
        hours, state = _extract(state, "H", parse_whole)
        minutes, state = _extract(state, "M", parse_whole)
        seconds, state = _extract(state, "S", parse_fixed_point)
        _expect_consumed(state)

    state = replace(state, remaining=date_part)
    years, state = _extract(state, "Y", parse_whole)
    months, state = _extract(state, "M", parse_whole)
    weeks, state = _extract(state, "W", parse_whole)
    days, state = _extract(state, "D", parse_whole)
    _expect_consumed(state)

    if not state.matched:
        raise PeriodParseError(ParseErrorKind.NO_FIELDS_MATCHED, text)

    days += weeks * DAYS_PER_WEEK
    if not INT64_MIN <= days <= INT64_MAX:
        raise PeriodParseError(ParseErrorKind.MALFORMED_FIELD_NUMBER, text, designator="W")

    return RawPeriod(
        text=text,
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        negative=negative,
    )


def parse_strict(text: str, normalise: bool) -> Period:
    """Parse ISO-8601 period *text*, normalising only when asked to.

    Raises:
        PeriodParseError: If *text* does not match the period grammar.
    """
    period = scan(text).to_period()
    if not normalise:
        return period
    try:
        return period.normalise()
    except OverflowError as exc:
        raise PeriodParseError(
            ParseErrorKind.MALFORMED_FIELD_NUMBER, text, designator="Y"
        ) from exc


def parse(text: str, normalise: bool = True) -> Period:
    """Parse ISO-8601 period *text*, e.g. ``"P1Y2M3D"`` or ``"-PT1.5S"``.

    By default 24 months become 2 years. Days are never carried into
    months, because the number of days per month varies.

    All of ``"P0Y"``, ``"P0M"``, ``"P0W"``, ``"P0D"``, ``"PT0H"``,
    ``"PT0M"``, ``"PT0S"`` and ``"P0"`` give the same zero period.

    Raises:
        PeriodParseError: If *text* does not match the period grammar.
    """
    return parse_strict(text, normalise)


def must_parse(text: str, normalise: bool = True) -> Period:
    """Parse a period literal that is known to be valid.

    For constants in source code only; never pass user input. A parse
    failure is a programming error and raises ``RuntimeError``.
    """
    try:
        return parse_strict(text, normalise)
    except PeriodParseError as exc:
        msg = f"invalid period literal {text!r}: {exc}"
        raise RuntimeError(msg) from exc
