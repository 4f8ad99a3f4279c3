"""
nelsc.engines.gregorian
-----------------------
Proleptic Gregorian calendar arithmetic on a linear count of days.

Day zero is 1200-03-01. Internally years are March-based, so February,
the only month of variable length, is the last month of the year and the
leap day always falls at the very end of a year, a 4-year cycle or a
400-year cycle.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Tuple

from nelsc.core.errors import ContractViolation

# 1582-10-15, the day the Gregorian calendar came into effect.
DAY_MIN = 139750
# 9999-12-31, the last day with a four-digit year.
DAY_MAX = 3214073

BASE_YEAR = 1200
MAX_YEAR = 9999

QC_DAYS = 146097  # 400 years
C_DAYS = 36524    # 100 years
Q_DAYS = 1461     # 4 years
Y_DAYS = 365
Y_LEAP_DAYS = 366

QC_YEARS = 400
C_YEARS = 100
Q_YEARS = 4

QC_C_COUNT = 4
C_Q_COUNT = 25
Q_Y_COUNT = 4

MONTH_COUNT = 12
# March-based month 0 is January-based month 2.
MONTH_OFFSET = 2

# Month lengths of a March-based year (March .. February).
# None marks February, whose length follows the leap-year rule.
MARCH_MONTH_LENGTHS: Tuple[Optional[int], ...] = (
    31, 30, 31, 30, 31, 31, 30, 31, 30, 31, 31, None,
)

LEAP_FEBRUARY = 29
COMMON_FEBRUARY = 28


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule. Defined for year >= 1."""
    if year < 1:
        raise ContractViolation(f"year must be >= 1, got {year}")
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def _march_month_length(index: int, march_year: int) -> int:
    n = MARCH_MONTH_LENGTHS[index]
    if n is None:
        # February of a March-based year belongs to the next January-based year.
        return LEAP_FEBRUARY if is_leap_year(march_year + 1) else COMMON_FEBRUARY
    return n


def days_in_month(year: int, month: int) -> int:
    """Length of a January-based month (1..12)."""
    if not (1 <= month <= MONTH_COUNT):
        raise ContractViolation(f"month must be in 1..12, got {month}")
    if year < 1:
        raise ContractViolation(f"year must be >= 1, got {year}")
    index = month - 1 - MONTH_OFFSET
    if index < 0:
        return _march_month_length(index + MONTH_COUNT, year - 1)
    return _march_month_length(index, year)


def offset_to_ymd(offset: int) -> Tuple[int, int, int]:
    """
    Day offset -> (year, month, day), month and day one-based.

    The offset must be in DAY_MIN..DAY_MAX.
    """
    if not (DAY_MIN <= offset <= DAY_MAX):
        raise ContractViolation(f"Gregorian day offset {offset} outside {DAY_MIN}..{DAY_MAX}")

    qc, rem = divmod(offset, QC_DAYS)
    c, rem = divmod(rem, C_DAYS)
    q, rem = divmod(rem, Q_DAYS)
    y, d = divmod(rem, Y_DAYS)

    # Leap day closing a 400-year cycle
    if c == QC_C_COUNT:
        c, q, y, d = QC_C_COUNT - 1, C_Q_COUNT - 1, Q_Y_COUNT - 1, Y_LEAP_DAYS - 1

    # Leap day closing a 4-year cycle
    if y == Q_Y_COUNT:
        y, d = Q_Y_COUNT - 1, Y_LEAP_DAYS - 1

    year = BASE_YEAR + qc * QC_YEARS + c * C_YEARS + q * Q_YEARS + y

    # February is last and never passed over.
    month = 0
    while MARCH_MONTH_LENGTHS[month] is not None and d >= MARCH_MONTH_LENGTHS[month]:
        d -= MARCH_MONTH_LENGTHS[month]
        month += 1

    month += MONTH_OFFSET
    if month >= MONTH_COUNT:
        month -= MONTH_COUNT
        year += 1

    return year, month + 1, d + 1


def offset_to_date(offset: int) -> date:
    return date(*offset_to_ymd(offset))


def date_to_offset(year: int, month: int, day: int) -> Optional[int]:
    """
    (year, month, day) -> day offset, or None if the triple is not a valid
    date in DAY_MIN..DAY_MAX.
    """
    if not (BASE_YEAR < year <= MAX_YEAR) or not (1 <= month <= MONTH_COUNT) or day < 1:
        return None

    d = day - 1
    m = month - 1 - MONTH_OFFSET
    if m < 0:
        m += MONTH_COUNT
        year -= 1

    if d >= _march_month_length(m, year):
        return None

    qc, rem = divmod(year - BASE_YEAR, QC_YEARS)
    c, rem = divmod(rem, C_YEARS)
    q, y = divmod(rem, Q_YEARS)

    offset = qc * QC_DAYS + c * C_DAYS + q * Q_DAYS + y * Y_DAYS
    # Only months before February can precede the target month.
    offset += sum(MARCH_MONTH_LENGTHS[:m])
    offset += d

    if not (DAY_MIN <= offset <= DAY_MAX):
        return None
    return offset


def from_date(d: date) -> Optional[int]:
    return date_to_offset(d.year, d.month, d.day)
