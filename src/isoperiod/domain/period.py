"""Period — the immutable ISO-8601 period value type.

Component magnitudes and the overall sign are stored separately; the sign
applies uniformly to every component. Weeks have no field of their own:
they are folded into days when parsed.

INVARIANT: Equality is defined on the signed component tuple, never on the
text a period was parsed from. Every spelling of zero is the same value.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, Field, model_validator

from isoperiod.domain.decimal import INT64_MAX, INT64_MIN, SCALE
from isoperiod.domain.normalise import normalise

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]

COMPONENTS: tuple[str, ...] = ("years", "months", "days", "hours", "minutes", "seconds")


class Period(BaseModel):
    """A signed span of calendar and clock time.

    Attributes:
        years: Whole years.
        months: Whole months.
        days: Whole days, including any weeks given in the source text.
        hours: Whole hours.
        minutes: Whole minutes.
        seconds: Seconds in thousandths (fixed-point, ``1500`` is 1.5s).
        negative: Overall sign. Always False for the zero period.
    """

    model_config = {"frozen": True}

    years: Int64 = 0
    months: Int64 = 0
    days: Int64 = 0
    hours: Int64 = 0
    minutes: Int64 = 0
    seconds: Int64 = 0
    negative: bool = False

    @model_validator(mode="before")
    @classmethod
    def _unsigned_zero(cls, data: Any) -> Any:
        if isinstance(data, dict) and not any(data.get(name, 0) for name in COMPONENTS):
            return {**data, "negative": False}
        return data

    @classmethod
    def parse(cls, text: str, *, normalise: bool = True) -> Period:
        """Parse ISO-8601 *text*; see :func:`isoperiod.domain.scanner.parse`."""
        from isoperiod.domain.scanner import parse_strict

        return parse_strict(text, normalise)

    @property
    def is_zero(self) -> bool:
        return not any(getattr(self, name) for name in COMPONENTS)

    @property
    def seconds_decimal(self) -> Decimal:
        """Seconds magnitude as an exact decimal, e.g. ``Decimal("1.5")``."""
        return Decimal(self.seconds) / SCALE

    def signed(self) -> tuple[int, ...]:
        """Component values with the overall sign applied, in ``COMPONENTS`` order."""
        sign = -1 if self.negative else 1
        return tuple(sign * getattr(self, name) for name in COMPONENTS)

    def replace(self, **changes: Any) -> Period:
        """Return a new, validated period with *changes* applied."""
        return Period(**{**self.model_dump(), **changes})

    def negate(self) -> Period:
        return self.replace(negative=not self.negative)

    def normalise(self) -> Period:
        """Return this period with whole multiples of 12 months folded into years."""
        return normalise(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.signed() == other.signed()

    def __hash__(self) -> int:
        return hash(self.signed())

    def __str__(self) -> str:
        from isoperiod.domain.format import format_period

        return format_period(self)
