from __future__ import annotations
from dataclasses import dataclass
from datetime import date

DAYS_PER_WEEK = 7

@dataclass(frozen=True)
class NelscDate:
    year: int
    month: int  # zero-based month of the year
    day: int    # zero-based day of the month

    @property
    def week(self) -> int:
        """One-based week of the month."""
        return self.day // DAYS_PER_WEEK + 1

    @property
    def day_of_week(self) -> int:
        """One-based day of the week."""
        return self.day % DAYS_PER_WEEK + 1

@dataclass(frozen=True)
class DayInfo:
    day: int
    absolute_month: int
    nelsc: NelscDate
    long_month: bool
    long_year: bool
    gregorian: date

@dataclass(frozen=True)
class FullMoonWeek:
    month: int
    first: date
    last: date

@dataclass(frozen=True)
class NewYearRow:
    year: int
    first_day: int
    gregorian: date
    equinox_offset: int  # months from the first month of the year to the month holding March 20
