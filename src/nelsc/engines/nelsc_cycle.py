"""
nelsc.engines.nelsc_cycle
-------------------------
Cycle arithmetic for the NELSC calendar.

Two independent layers:
  day <-> absolute month   (32-month pattern of 28/35-day months, 945 days)
  absolute month <-> year  (11-year spans of 12/13-month years, 136 months,
                            21 spans per 231-year pattern of 2857 months)

Composing them gives day <-> (year, month of year, day of month). All
offsets are signed; decomposition uses floor division so the remainders
are always positions inside a pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from nelsc.core.errors import ContractViolation
from nelsc.core.types import NelscDate
from nelsc.engines.patterns import CyclePattern, YearPattern, MONTH_PATTERN, YEAR_PATTERN

DAY_MIN = -35364
DAY_MAX = 175020
MONTH_MIN = -1197
MONTH_MAX = 5926
YEAR_MIN = -96
YEAR_MAX = 479

# Gregorian day offset = NELSC day offset + GREGORIAN_OFFSET.
# NELSC day 0 is 1925-02-02.
GREGORIAN_OFFSET = 264773

# Days from the first day of year zero to absolute day 0.
DAY_EPOCH = 308
# Months from the first month of year zero to absolute month 0.
MONTH_EPOCH = 10
# Year zero starts 121 years (11 whole spans, 1496 months) into a 231-year pattern.
YEAR_ORIGIN = 121
MONTH_ORIGIN = 1496

# 38 whole 32-month patterns, in days and in months. Adding them lifts every
# in-range offset to a non-negative pattern position without moving it.
NEGATIVE_DAY_BIAS = 35910
NEGATIVE_MONTH_BIAS = 1216


def _require(name: str, value: int, bounds: Tuple[int, int]) -> None:
    lo, hi = bounds
    if not (lo <= value <= hi):
        raise ContractViolation(f"NELSC {name} {value} outside {lo}..{hi}")


@dataclass(frozen=True)
class NelscCycleParams:
    month_pattern: CyclePattern = MONTH_PATTERN
    year_pattern: YearPattern = YEAR_PATTERN

    day_epoch: int = DAY_EPOCH
    month_epoch: int = MONTH_EPOCH
    year_origin: int = YEAR_ORIGIN

    day_range: Tuple[int, int] = (DAY_MIN, DAY_MAX)
    month_range: Tuple[int, int] = (MONTH_MIN, MONTH_MAX)
    year_range: Tuple[int, int] = (YEAR_MIN, YEAR_MAX)

    def __post_init__(self) -> None:
        for name in ("day_range", "month_range", "year_range"):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ValueError(f"{name} must satisfy min <= max")
        if not (0 <= self.year_origin < self.year_pattern.years):
            raise ValueError("year_origin must lie inside one year pattern")

    @property
    def month_origin(self) -> int:
        """Months from the start of a year pattern to the first month of year zero."""
        span = self.year_pattern.span
        spans, years = divmod(self.year_origin, len(span))
        return spans * span.total + span.prefix(years)


class NelscCycleEngine:
    """
    Day <-> month and month <-> year conversions.

    Every public method checks its argument against the engine ranges and
    raises ContractViolation when it is outside them, except date_to_day,
    which validates untrusted input and returns None instead.
    """
    def __init__(self, params: Optional[NelscCycleParams] = None):
        self.p = params if params is not None else NelscCycleParams()
        self._check_ranges()

    def _check_ranges(self) -> None:
        d0, d1 = self.p.day_range
        m0, m1 = self.p.month_range
        y0, y1 = self.p.year_range
        if self._month_start(m0) != d0 or self._month_start(m1 + 1) != d1 + 1:
            raise ValueError("day_range must span exactly the months of month_range")
        if self._year_start(y0) != m0 or self._year_start(y1 + 1) != m1 + 1:
            raise ValueError("month_range must span exactly the years of year_range")

    # ---------------------------------------------------------
    # Day <-> Month
    # ---------------------------------------------------------

    def day_to_month(self, day: int) -> Tuple[int, int]:
        """Returns (absolute month, zero-based day of the month)."""
        _require("day", day, self.p.day_range)
        pat = self.p.month_pattern
        cycles, rem = divmod(day + self.p.day_epoch, pat.total)
        index, into = pat.locate(rem)
        return cycles * len(pat) + index - self.p.month_epoch, into

    def month_to_day(self, month: int) -> int:
        """First day of the absolute month."""
        _require("month", month, self.p.month_range)
        return self._month_start(month)

    def _month_start(self, month: int) -> int:
        pat = self.p.month_pattern
        cycles, rem = divmod(month + self.p.month_epoch, len(pat))
        return cycles * pat.total + pat.prefix(rem) - self.p.day_epoch

    # ---------------------------------------------------------
    # Month <-> Year
    # ---------------------------------------------------------

    def month_to_year(self, month: int) -> Tuple[int, int]:
        """Returns (year, zero-based month of the year)."""
        _require("month", month, self.p.month_range)
        yp = self.p.year_pattern
        span = yp.span

        patterns, rem = divmod(month + self.p.month_epoch + self.p.month_origin, yp.months)
        years = patterns * yp.years - self.p.year_origin

        if rem == yp.months - 1:
            # Thirteenth month of the forced-long year closing the pattern.
            return years + yp.years - 1, span.long - 1

        spans, rem = divmod(rem, span.total)
        index, into = span.locate(rem)
        return years + spans * len(span) + index, into

    def year_to_month(self, year: int) -> int:
        """First absolute month of the year."""
        _require("year", year, self.p.year_range)
        return self._year_start(year)

    def _year_start(self, year: int) -> int:
        yp = self.p.year_pattern
        span = yp.span
        patterns, rem = divmod(year + self.p.year_origin, yp.years)
        spans, rem = divmod(rem, len(span))
        # rem <= 10: the last span entry, the only one the forced-long rule
        # touches, is never summed here.
        months = patterns * yp.months + spans * span.total + span.prefix(rem)
        return months - self.p.month_origin - self.p.month_epoch

    # ---------------------------------------------------------
    # Lengths
    # ---------------------------------------------------------

    def days_in_month(self, month: int) -> int:
        _, m1 = self.p.month_range
        begin = self.month_to_day(month)
        if month < m1:
            end = self.month_to_day(month + 1)
        else:
            end = self.p.day_range[1] + 1
        return end - begin

    def months_in_year(self, year: int) -> int:
        _, y1 = self.p.year_range
        begin = self.year_to_month(year)
        if year < y1:
            end = self.year_to_month(year + 1)
        else:
            end = self.p.month_range[1] + 1
        return end - begin

    def is_long_month(self, month: int) -> bool:
        return self.days_in_month(month) > self.p.month_pattern.short

    def is_long_year(self, year: int) -> bool:
        return self.months_in_year(year) > self.p.year_pattern.span.short

    # ---------------------------------------------------------
    # Full dates
    # ---------------------------------------------------------

    def day_to_date(self, day: int) -> NelscDate:
        month, day_of_month = self.day_to_month(day)
        year, month_of_year = self.month_to_year(month)
        return NelscDate(year=year, month=month_of_year, day=day_of_month)

    def date_to_day(self, year: int, month: int, day: int) -> Optional[int]:
        """
        (year, zero-based month, zero-based day) -> absolute day, or None if
        the combination does not exist.
        """
        y0, y1 = self.p.year_range
        if not (y0 <= year <= y1):
            return None
        if not (0 <= month < self.months_in_year(year)):
            return None
        abs_month = self.year_to_month(year) + month
        if not (0 <= day < self.days_in_month(abs_month)):
            return None
        return self.month_to_day(abs_month) + day


DEFAULT_ENGINE = NelscCycleEngine()
