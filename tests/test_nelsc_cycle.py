# tests/test_nelsc_cycle.py

import random

import pytest

from nelsc.core.errors import ContractViolation
from nelsc.core.types import NelscDate
from nelsc.engines import nelsc_cycle as cyc
from nelsc.engines.nelsc_cycle import NelscCycleEngine, NelscCycleParams

ENG = cyc.DEFAULT_ENGINE


def test_range_boundaries():
    assert ENG.day_to_month(cyc.DAY_MIN) == (cyc.MONTH_MIN, 0)
    assert ENG.month_to_day(cyc.MONTH_MIN) == cyc.DAY_MIN
    assert ENG.day_to_month(cyc.DAY_MAX) == (cyc.MONTH_MAX, 34)
    assert ENG.month_to_day(cyc.MONTH_MAX) == 174986

    assert ENG.month_to_year(cyc.MONTH_MIN) == (cyc.YEAR_MIN, 0)
    assert ENG.year_to_month(cyc.YEAR_MIN) == cyc.MONTH_MIN
    assert ENG.month_to_year(cyc.MONTH_MAX) == (cyc.YEAR_MAX, 12)
    assert ENG.year_to_month(cyc.YEAR_MAX) == 5914

    assert ENG.is_long_month(cyc.MONTH_MAX)
    assert not ENG.is_long_month(cyc.MONTH_MIN)
    assert ENG.is_long_year(cyc.YEAR_MAX)


@pytest.mark.parametrize(
    "fn, value",
    [
        ("day_to_month", cyc.DAY_MIN - 1),
        ("day_to_month", cyc.DAY_MAX + 1),
        ("month_to_day", cyc.MONTH_MIN - 1),
        ("month_to_day", cyc.MONTH_MAX + 1),
        ("month_to_year", cyc.MONTH_MIN - 1),
        ("month_to_year", cyc.MONTH_MAX + 1),
        ("year_to_month", cyc.YEAR_MIN - 1),
        ("year_to_month", cyc.YEAR_MAX + 1),
        ("is_long_month", cyc.MONTH_MAX + 1),
        ("is_long_year", cyc.YEAR_MIN - 1),
    ],
)
def test_out_of_range_is_contract_violation(fn, value):
    with pytest.raises(ContractViolation):
        getattr(ENG, fn)(value)


def test_epochs():
    """Day 0 is day 14 of month 0; month 0 is month 10 of year 0."""
    assert ENG.day_to_month(0) == (0, 14)
    assert ENG.month_to_day(0) == -14
    assert ENG.month_to_year(0) == (0, 10)
    assert ENG.year_to_month(0) == -10
    assert ENG.month_to_day(-10) == -cyc.DAY_EPOCH
    assert ENG.day_to_date(0) == NelscDate(year=0, month=10, day=14)


def test_forced_long_years():
    """Years 109 and 340 close a 231-year pattern: long, though their span symbol is short."""
    for year in (109, 340):
        assert (year + cyc.YEAR_ORIGIN) % 231 == 230
        assert ENG.is_long_year(year)
        assert ENG.months_in_year(year) == 13

    assert ENG.year_to_month(109) == 1338
    assert ENG.year_to_month(110) == 1351
    assert ENG.month_to_year(1338) == (109, 0)
    assert ENG.month_to_year(1349) == (109, 11)
    assert ENG.month_to_year(1350) == (109, 12)
    assert ENG.month_to_year(1351) == (110, 0)

    assert ENG.year_to_month(340) == 4195
    assert ENG.month_to_year(4207) == (340, 12)
    assert ENG.month_to_year(4208) == (341, 0)


def test_span_years():
    # 108 sits on an L of the span, 107 on an S.
    assert ENG.is_long_year(108)
    assert not ENG.is_long_year(107)
    assert not ENG.is_long_year(0)


def test_long_years_per_pattern():
    years = range(cyc.YEAR_MIN, cyc.YEAR_MIN + 231)
    assert sum(ENG.is_long_year(y) for y in years) == 85
    assert sum(ENG.months_in_year(y) for y in years) == 2857


def test_lengths_cover_whole_range():
    months = range(cyc.MONTH_MIN, cyc.MONTH_MAX + 1)
    assert sum(ENG.days_in_month(m) for m in months) == cyc.DAY_MAX - cyc.DAY_MIN + 1
    years = range(cyc.YEAR_MIN, cyc.YEAR_MAX + 1)
    assert sum(ENG.months_in_year(y) for y in years) == cyc.MONTH_MAX - cyc.MONTH_MIN + 1
    assert {ENG.days_in_month(m) for m in months} == {28, 35}
    assert {ENG.months_in_year(y) for y in years} == {12, 13}


def test_every_month_round_trips():
    prev = None
    for m in range(cyc.MONTH_MIN, cyc.MONTH_MAX + 1):
        y, mi = ENG.month_to_year(m)
        assert ENG.year_to_month(y) + mi == m
        assert 0 <= mi < ENG.months_in_year(y)
        if prev is not None:
            assert (y, mi) in ((prev[0], prev[1] + 1), (prev[0] + 1, 0))
        prev = (y, mi)


def test_consecutive_days():
    for start in (cyc.DAY_MIN, -2000, cyc.DAY_MAX - 2000):
        prev = ENG.day_to_month(start)
        for day in range(start + 1, start + 2001):
            cur = ENG.day_to_month(day)
            assert cur in ((prev[0], prev[1] + 1), (prev[0] + 1, 0))
            prev = cur


def test_random_days_round_trip():
    random.seed(42)
    for _ in range(10000):
        day = random.randint(cyc.DAY_MIN, cyc.DAY_MAX)
        m, d = ENG.day_to_month(day)
        assert ENG.month_to_day(m) + d == day
        assert 0 <= d < ENG.days_in_month(m)

        t = ENG.day_to_date(day)
        assert ENG.date_to_day(t.year, t.month, t.day) == day


def test_bias_constants():
    """The negative-offset biases are whole month patterns and lift every in-range value to >= 0."""
    pat = cyc.NelscCycleParams().month_pattern
    assert cyc.NEGATIVE_DAY_BIAS == 38 * pat.total
    assert cyc.NEGATIVE_MONTH_BIAS == 38 * len(pat)
    assert cyc.DAY_MIN + cyc.DAY_EPOCH + cyc.NEGATIVE_DAY_BIAS >= 0
    assert cyc.MONTH_MIN + cyc.MONTH_EPOCH + cyc.NEGATIVE_MONTH_BIAS >= 0

    random.seed(3)
    for _ in range(1000):
        day = random.randint(cyc.DAY_MIN, -1)
        q, r = divmod(day + cyc.DAY_EPOCH + cyc.NEGATIVE_DAY_BIAS, pat.total)
        assert ENG.day_to_month(day) == (
            (q - 38) * len(pat) + pat.locate(r)[0] - cyc.MONTH_EPOCH,
            pat.locate(r)[1],
        )


def test_month_origin():
    assert NelscCycleParams().month_origin == cyc.MONTH_ORIGIN


@pytest.mark.parametrize(
    "year, month, day",
    [
        (0, 12, 0),                 # year 0 has 12 months
        (0, -1, 0),
        (0, 10, 28),                # month 0 is short
        (0, 10, -1),
        (cyc.YEAR_MIN, 0, 28),
        (cyc.YEAR_MIN - 1, 0, 0),
        (cyc.YEAR_MAX + 1, 0, 0),
        (cyc.YEAR_MAX, 13, 0),
    ],
)
def test_date_to_day_rejects(year, month, day):
    assert ENG.date_to_day(year, month, day) is None


def test_date_to_day_accepts():
    assert ENG.date_to_day(0, 10, 14) == 0
    assert ENG.date_to_day(cyc.YEAR_MIN, 0, 27) == cyc.DAY_MIN + 27
    assert ENG.date_to_day(cyc.YEAR_MAX, 12, 34) == cyc.DAY_MAX
    assert ENG.date_to_day(0, 11, 34) == 48   # month 1 is long
    assert ENG.date_to_day(109, 12, 0) == ENG.month_to_day(1350)


def test_inconsistent_ranges_are_rejected():
    with pytest.raises(ValueError):
        NelscCycleParams(day_range=(5, 1))
    with pytest.raises(ValueError):
        NelscCycleParams(year_origin=231)
    with pytest.raises(ValueError):
        NelscCycleEngine(NelscCycleParams(day_range=(cyc.DAY_MIN, cyc.DAY_MAX - 1)))
    with pytest.raises(ValueError):
        NelscCycleEngine(NelscCycleParams(month_range=(cyc.MONTH_MIN + 1, cyc.MONTH_MAX)))


def test_narrow_engine():
    """An engine restricted to year 0 alone."""
    eng = NelscCycleEngine(
        NelscCycleParams(day_range=(-308, 48), month_range=(-10, 1), year_range=(0, 0))
    )
    assert eng.months_in_year(0) == 12
    assert eng.days_in_month(1) == 35
    assert eng.day_to_month(48) == (1, 34)
    with pytest.raises(ContractViolation):
        eng.day_to_month(49)
    assert eng.date_to_day(1, 0, 0) is None
