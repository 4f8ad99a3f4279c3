"""
nelsc.formats.dates
-------------------
Text forms of Gregorian and NELSC dates.

Gregorian: "YYYY-MM-DD" (four-digit year; month and day may be given with
one or two digits when scanning, and are printed with two).

NELSC: "YY:Mw-d", always seven characters, e.g. "3T:C4-5":
  YY  year as a signed base-24 pair
  M   one-based month of the year as a base-24 digit (1..D)
  w   one-based week of the month (1..5)
  d   one-based day of the week (1..7)
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from nelsc.core.errors import ContractViolation
from nelsc.core.types import DAYS_PER_WEEK, NelscDate
from nelsc.engines import gregorian
from nelsc.engines.nelsc_cycle import DEFAULT_ENGINE, NelscCycleEngine
from nelsc.formats import base24

GREGORIAN_DATE_LENGTH = 10
NELSC_DATE_LENGTH = 7

_GREGORIAN_RE = re.compile(r"([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})(?![0-9])")

# Character positions inside a NELSC date
_YEAR_SEP = 2
_WEEK_SEP = 5
_MONTH_POS = 3
_WEEK_POS = 4
_DAY_POS = 6


# ============================================================
# Gregorian
# ============================================================

def format_gregorian(year: int, month: int, day: int) -> str:
    if gregorian.date_to_offset(year, month, day) is None:
        raise ContractViolation(f"not a valid Gregorian date: {year}-{month}-{day}")
    return f"{year:04d}-{month:02d}-{day:02d}"


def format_gregorian_day(offset: int) -> str:
    return format_gregorian(*gregorian.offset_to_ymd(offset))


def scan_gregorian(text: str) -> Optional[Tuple[int, str]]:
    """
    Read a Gregorian date at the start of text.

    Returns (day offset, text following the date), or None if text does not
    start with a valid date. Leading whitespace is not skipped.
    """
    m = _GREGORIAN_RE.match(text)
    if m is None:
        return None
    offset = gregorian.date_to_offset(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    if offset is None:
        return None
    return offset, text[m.end():]


# ============================================================
# NELSC
# ============================================================

def format_nelsc(year: int, month: int, day: int, *, engine: Optional[NelscCycleEngine] = None) -> str:
    """Format a NELSC date given with zero-based month and day."""
    eng = engine if engine is not None else DEFAULT_ENGINE
    if eng.date_to_day(year, month, day) is None:
        raise ContractViolation(f"not a valid NELSC date: year={year} month={month} day={day}")
    week, dow = divmod(day, DAYS_PER_WEEK)
    return f"{base24.int_to_pair(year)}:{base24.int_to_digit(month + 1)}{week + 1}-{dow + 1}"


def format_nelsc_date(d: NelscDate, *, engine: Optional[NelscCycleEngine] = None) -> str:
    return format_nelsc(d.year, d.month, d.day, engine=engine)


def scan_nelsc(text: str, *, engine: Optional[NelscCycleEngine] = None) -> Optional[int]:
    """
    Read a NELSC date from the first seven characters of text and return
    its absolute day, or None if they are not a valid date. Anything after
    the seventh character is ignored.
    """
    eng = engine if engine is not None else DEFAULT_ENGINE
    if len(text) < NELSC_DATE_LENGTH:
        return None
    if text[_YEAR_SEP] != ":" or text[_WEEK_SEP] != "-":
        return None

    year = base24.pair_to_int(text[:_YEAR_SEP])
    month = base24.digit_to_int(text[_MONTH_POS])
    week = base24.digit_to_int(text[_WEEK_POS])
    dow = base24.digit_to_int(text[_DAY_POS])
    if year is None or month is None or week is None or dow is None:
        return None

    if month < 1 or week < 1 or not (1 <= dow <= DAYS_PER_WEEK):
        return None

    # Upper bounds of month and week depend on year and month length.
    return eng.date_to_day(year, month - 1, (week - 1) * DAYS_PER_WEEK + (dow - 1))
