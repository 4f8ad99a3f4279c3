# tests/test_patterns.py

import pytest

from nelsc.core.errors import ContractViolation
from nelsc.engines.patterns import (
    CyclePattern,
    YearPattern,
    MONTH_PATTERN,
    YEAR_PATTERN,
    YEAR_SPAN_PATTERN,
)


def test_month_pattern_sums():
    assert len(MONTH_PATTERN) == 32
    assert MONTH_PATTERN.total == 945
    assert MONTH_PATTERN.lengths.count(35) == 7
    assert set(MONTH_PATTERN.lengths) == {28, 35}


def test_year_span_pattern_sums():
    assert len(YEAR_SPAN_PATTERN) == 11
    assert YEAR_SPAN_PATTERN.total == 136
    assert set(YEAR_SPAN_PATTERN.lengths) == {12, 13}


def test_year_pattern_forced_long_final_year():
    assert YEAR_PATTERN.years == 231
    assert YEAR_PATTERN.months == 2857
    assert sum(YEAR_PATTERN.length(i) for i in range(YEAR_PATTERN.years)) == 2857

    # The 11th year of a span is short, except at the end of the 231-year pattern.
    assert not YEAR_SPAN_PATTERN.is_long(10)
    assert not YEAR_PATTERN.is_long(219)
    assert YEAR_PATTERN.is_long(230)
    assert sum(YEAR_PATTERN.is_long(i) for i in range(231)) == 21 * 4 + 1


def test_prefix_and_locate():
    assert MONTH_PATTERN.prefix(0) == 0
    assert MONTH_PATTERN.prefix(3) == 28 + 28 + 35
    assert MONTH_PATTERN.prefix(32) == 945

    assert MONTH_PATTERN.locate(0) == (0, 0)
    assert MONTH_PATTERN.locate(56) == (2, 0)
    assert MONTH_PATTERN.locate(90) == (2, 34)
    assert MONTH_PATTERN.locate(91) == (3, 0)
    assert MONTH_PATTERN.locate(944) == (31, 27)

    assert YEAR_SPAN_PATTERN.locate(135) == (10, 11)


def test_locate_agrees_with_prefix():
    for i in range(len(MONTH_PATTERN)):
        start = MONTH_PATTERN.prefix(i)
        assert MONTH_PATTERN.locate(start) == (i, 0)
        assert MONTH_PATTERN.locate(start + MONTH_PATTERN.length(i) - 1) == (i, MONTH_PATTERN.length(i) - 1)


def test_out_of_pattern_access_is_contract_violation():
    with pytest.raises(ContractViolation):
        MONTH_PATTERN.is_long(32)
    with pytest.raises(ContractViolation):
        MONTH_PATTERN.is_long(-1)
    with pytest.raises(ContractViolation):
        MONTH_PATTERN.prefix(33)
    with pytest.raises(ContractViolation):
        MONTH_PATTERN.locate(945)
    with pytest.raises(ContractViolation):
        YEAR_PATTERN.is_long(231)


@pytest.mark.parametrize(
    "symbols, short, long",
    [("", 1, 2), ("SX", 1, 2), ("SL", 2, 2), ("SL", 0, 1)],
)
def test_invalid_patterns(symbols, short, long):
    with pytest.raises(ValueError):
        CyclePattern(symbols, short, long)


def test_invalid_year_pattern():
    with pytest.raises(ValueError):
        YearPattern(span=YEAR_SPAN_PATTERN, spans=0)
