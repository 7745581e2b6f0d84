"""isoperiod — exact ISO-8601 period parsing, normalisation, and formatting."""

from isoperiod.domain.errors import ParseErrorKind, PeriodParseError
from isoperiod.domain.format import format_period
from isoperiod.domain.normalise import normalise
from isoperiod.domain.period import Period
from isoperiod.domain.scanner import must_parse, parse, parse_strict

__version__ = "0.1.0"

__all__ = [
    "ParseErrorKind",
    "Period",
    "PeriodParseError",
    "__version__",
    "format_period",
    "must_parse",
    "normalise",
    "parse",
    "parse_strict",
]
