"""Tests for the months-to-years normalisation engine."""

import pytest

from isoperiod.domain.decimal import INT64_MAX
from isoperiod.domain.normalise import normalise, normalise_months
from isoperiod.domain.period import Period


class TestNormaliseMonths:
    @pytest.mark.parametrize(
        "years,months,expected",
        [
            (0, 0, (0, 0)),
            (0, 11, (0, 11)),
            (0, 12, (1, 0)),
            (0, 24, (2, 0)),
            (1, 11, (1, 11)),
            (1, 25, (3, 1)),
            (-1, 13, (0, 1)),
            (0, -14, (-1, -2)),
            (-2, 3, (-1, -9)),
            (2, -3, (1, 9)),
        ],
    )
    def test_values(self, years: int, months: int, expected: tuple[int, int]) -> None:
        assert normalise_months(years, months) == expected

    @pytest.mark.parametrize("years,months", [(3, 7), (-3, 7), (0, -25), (5, -61)])
    def test_total_months_preserved(self, years: int, months: int) -> None:
        y, m = normalise_months(years, months)
        assert y * 12 + m == years * 12 + months
        assert abs(m) < 12

    def test_remainder_sign_follows_total(self) -> None:
        y, m = normalise_months(0, -13)
        assert y <= 0 and m <= 0


class TestNormalise:
    def test_only_years_and_months_change(self) -> None:
        p = Period(months=30, days=45, hours=30, minutes=90, seconds=90500)
        n = normalise(p)
        assert (n.years, n.months) == (2, 6)
        assert (n.days, n.hours, n.minutes, n.seconds) == (45, 30, 90, 90500)

    def test_sign_passes_through(self) -> None:
        n = normalise(Period(months=14, negative=True))
        assert n.negative is True
        assert (n.years, n.months) == (1, 2)

    def test_idempotent(self) -> None:
        once = normalise(Period(years=1, months=40))
        assert normalise(once) == once

    def test_returns_new_value(self) -> None:
        p = Period(months=12)
        n = normalise(p)
        assert p.months == 12
        assert n is not p

    def test_overflow(self) -> None:
        with pytest.raises(OverflowError):
            normalise(Period(years=INT64_MAX, months=12))
