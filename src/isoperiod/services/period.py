"""PeriodService — parse, check, and negate periods as ServiceResults.

Bad input never raises here: a :class:`PeriodParseError` becomes a
failed result whose error code is the upper-cased error kind, with the
original input and offending designator in ``error.detail``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

from isoperiod.domain.errors import PeriodParseError
from isoperiod.domain.period import COMPONENTS, Period
from isoperiod.domain.scanner import parse_strict
from isoperiod.services.result import ServiceResult

logger = logging.getLogger(__name__)

# Seconds carrying more fractional digits than the one that is kept.
_TRUNCATED_FRACTION = re.compile(r"[.,][0-9]{2,}S$")


def describe_period(period: Period) -> dict[str, Any]:
    """Flatten a period into JSON-safe fields.

    Seconds are given as a decimal string so no precision is lost.
    """
    data: dict[str, Any] = {name: getattr(period, name) for name in COMPONENTS}
    data["seconds"] = str(period.seconds_decimal)
    data["negative"] = period.negative
    return data


def error_detail(exc: PeriodParseError) -> dict[str, Any]:
    detail: dict[str, Any] = {"input": exc.text, "kind": exc.kind.value}
    if exc.designator is not None:
        detail["designator"] = exc.designator
    if exc.remainder is not None:
        detail["remainder"] = exc.remainder
    return detail


class PeriodService:
    """Period operations for the CLI and other result-consuming callers.

    Args:
        normalise: Default for whether parsed periods fold months into
            years. Individual calls may override it.
    """

    def __init__(self, *, normalise: bool = True) -> None:
        self._normalise = normalise

    def _parse(self, text: str, normalise: bool | None) -> Period:
        flag = self._normalise if normalise is None else normalise
        return parse_strict(text, flag)

    def _failure(self, op: str, exc: PeriodParseError) -> ServiceResult:
        logger.debug("Rejected period %r (%s)", exc.text, exc.kind)
        return ServiceResult.failure(op, exc.kind.name, str(exc), error_detail(exc))

    def parse(self, text: str, *, normalise: bool | None = None) -> ServiceResult:
        """Parse *text* and report its components and canonical text."""
        op = "parse"
        try:
            period = self._parse(text, normalise)
        except PeriodParseError as exc:
            return self._failure(op, exc)

        warnings: list[str] = []
        if _TRUNCATED_FRACTION.search(text):
            warnings.append(f"Fractional seconds in {text!r} truncated to one digit")

        return ServiceResult.success(
            op,
            {
                "input": text,
                "period": str(period),
                "normalised": self._normalise if normalise is None else normalise,
                "components": describe_period(period),
            },
            warnings,
        )

    def negate(self, text: str) -> ServiceResult:
        """Parse *text* and return its negation."""
        op = "negate"
        try:
            period = self._parse(text, None).negate()
        except PeriodParseError as exc:
            return self._failure(op, exc)
        return ServiceResult.success(
            op,
            {"input": text, "period": str(period), "components": describe_period(period)},
        )

    def check(self, texts: Sequence[str]) -> ServiceResult:
        """Validate each of *texts*; fails if any one of them is invalid."""
        op = "check"
        items: list[dict[str, Any]] = []
        for text in texts:
            try:
                period = self._parse(text, None)
            except PeriodParseError as exc:
                logger.debug("Rejected period %r (%s)", text, exc.kind)
                items.append(
                    {"input": text, "valid": False, "code": exc.kind.name, "message": str(exc)}
                )
                continue
            items.append({"input": text, "valid": True, "period": str(period)})

        invalid = [item for item in items if not item["valid"]]
        if invalid:
            return ServiceResult.failure(
                op,
                "INVALID_PERIODS",
                f"{len(invalid)} of {len(items)} periods are invalid",
                {"items": items, "invalid_count": len(invalid)},
            )
        return ServiceResult.success(op, {"items": items, "count": len(items)})
