from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

from .core.errors import ContractViolation
from .core.types import DayInfo, FullMoonWeek, NelscDate, NewYearRow
from .engines import gregorian
from .engines.nelsc_cycle import DEFAULT_ENGINE, GREGORIAN_OFFSET, NelscCycleEngine
from .formats import dates

log = logging.getLogger(__name__)

# Full moon week, as day offsets into a short / long month.
FULLMOON_SHORT = (14, 20)
FULLMOON_LONG = (21, 27)

# March 20, close to the March equinox in every year.
EQUINOX_MONTH = 3
EQUINOX_DAY = 20

_engine: Optional[NelscCycleEngine] = None

def set_engine(engine: Optional[NelscCycleEngine]) -> None:
    """Replace the engine used by this module; None restores the default."""
    global _engine
    _engine = engine

def _eng() -> NelscCycleEngine:
    return _engine if _engine is not None else DEFAULT_ENGINE

# ============================================================
# NELSC conversions
# ============================================================

def day_to_month(day: int) -> Tuple[int, int]:
    return _eng().day_to_month(day)

def month_to_day(month: int) -> int:
    return _eng().month_to_day(month)

def month_to_year(month: int) -> Tuple[int, int]:
    return _eng().month_to_year(month)

def year_to_month(year: int) -> int:
    return _eng().year_to_month(year)

def is_long_month(month: int) -> bool:
    return _eng().is_long_month(month)

def is_long_year(year: int) -> bool:
    return _eng().is_long_year(year)

def nelsc_date(day: int) -> NelscDate:
    return _eng().day_to_date(day)

def nelsc_day(year: int, month: int, day: int) -> Optional[int]:
    return _eng().date_to_day(year, month, day)

def format_day(day: int) -> str:
    """NELSC day -> "YY:Mw-d"."""
    return dates.format_nelsc_date(nelsc_date(day), engine=_eng())

# ============================================================
# Cross-calendar
# ============================================================

def to_gregorian_day(day: int) -> int:
    lo, hi = _eng().p.day_range
    if not (lo <= day <= hi):
        raise ContractViolation(f"NELSC day {day} outside {lo}..{hi}")
    return day + GREGORIAN_OFFSET

def from_gregorian_day(offset: int) -> Optional[int]:
    """Gregorian day offset -> NELSC day, or None outside the NELSC range."""
    day = offset - GREGORIAN_OFFSET
    lo, hi = _eng().p.day_range
    if not (lo <= day <= hi):
        return None
    return day

def to_gregorian(day: int) -> date:
    return gregorian.offset_to_date(to_gregorian_day(day))

def from_gregorian(d: date) -> Optional[int]:
    offset = gregorian.from_date(d)
    if offset is None:
        return None
    return from_gregorian_day(offset)

# ============================================================
# Day information
# ============================================================

def day_info(day: int) -> DayInfo:
    eng = _eng()
    month, day_of_month = eng.day_to_month(day)
    year, month_of_year = eng.month_to_year(month)
    return DayInfo(
        day=day,
        absolute_month=month,
        nelsc=NelscDate(year=year, month=month_of_year, day=day_of_month),
        long_month=eng.is_long_month(month),
        long_year=eng.is_long_year(year),
        gregorian=to_gregorian(day),
    )

def month_info(month: int) -> DayInfo:
    """Information about the first day of an absolute month."""
    return day_info(_eng().month_to_day(month))

def parse_date(text: str) -> Optional[int]:
    """
    Parse a NELSC ("3T:C4-7") or Gregorian ("YYYY-MM-DD") date into a NELSC
    day. Leading and trailing whitespace is allowed, nothing else.
    """
    s = text.lstrip()
    if not s:
        return None

    day = dates.scan_nelsc(s, engine=_eng())
    if day is not None:
        rest = s[dates.NELSC_DATE_LENGTH:]
    else:
        scanned = dates.scan_gregorian(s)
        if scanned is None:
            log.debug("not a NELSC or Gregorian date: %r", text)
            return None
        offset, rest = scanned
        day = from_gregorian_day(offset)
        if day is None:
            log.debug("Gregorian date %r is outside the NELSC range", text)
            return None
        log.debug("parsed %r as Gregorian day %d", text, offset)

    if rest.strip():
        log.debug("trailing characters after date: %r", rest)
        return None
    return day

# ============================================================
# Tables
# ============================================================

def full_moon_weeks(first_month: int, last_month: int) -> List[FullMoonWeek]:
    """Gregorian dates of the full moon week of each month in first..last."""
    eng = _eng()
    lo, hi = eng.p.month_range
    if not (lo <= first_month <= hi and lo <= last_month <= hi):
        raise ContractViolation(f"months must be in {lo}..{hi}")
    if first_month > last_month:
        raise ContractViolation("first_month must not be after last_month")

    out: List[FullMoonWeek] = []
    for m in range(first_month, last_month + 1):
        begin = eng.month_to_day(m)
        b, e = FULLMOON_LONG if eng.is_long_month(m) else FULLMOON_SHORT
        out.append(FullMoonWeek(month=m, first=to_gregorian(begin + b), last=to_gregorian(begin + e)))
    return out

def new_year_rows() -> List[NewYearRow]:
    """
    First day of every NELSC year, with the month offset from the first
    month of the year to the month holding March 20 of the same Gregorian
    year. The first year gets -1: its March 20 precedes the NELSC range.
    """
    eng = _eng()
    y0, y1 = eng.p.year_range
    rows: List[NewYearRow] = []
    for y in range(y0, y1 + 1):
        first_month = eng.year_to_month(y)
        first_day = eng.month_to_day(first_month)
        g = to_gregorian(first_day)
        if y > y0:
            equinox = gregorian.date_to_offset(g.year, EQUINOX_MONTH, EQUINOX_DAY)
            equinox_month = eng.day_to_month(equinox - GREGORIAN_OFFSET)[0]
        else:
            equinox_month = first_month - 1
        rows.append(NewYearRow(year=y, first_day=first_day, gregorian=g, equinox_offset=equinox_month - first_month))
    return rows
