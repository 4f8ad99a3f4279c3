"""nelsc public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    set_engine,
    day_to_month,
    month_to_day,
    month_to_year,
    year_to_month,
    is_long_month,
    is_long_year,
    nelsc_date,
    nelsc_day,
    format_day,
    to_gregorian_day,
    from_gregorian_day,
    to_gregorian,
    from_gregorian,
    day_info,
    month_info,
    parse_date,
    full_moon_weeks,
    new_year_rows,
)
from .core.errors import ContractViolation, NelscError
from .core.types import DayInfo, FullMoonWeek, NelscDate, NewYearRow
from .engines.gregorian import date_to_offset, is_leap_year, offset_to_date, offset_to_ymd
from .engines.nelsc_cycle import GREGORIAN_OFFSET, NelscCycleEngine, NelscCycleParams

__all__ = [
    "set_engine",
    "day_to_month",
    "month_to_day",
    "month_to_year",
    "year_to_month",
    "is_long_month",
    "is_long_year",
    "nelsc_date",
    "nelsc_day",
    "format_day",
    "to_gregorian_day",
    "from_gregorian_day",
    "to_gregorian",
    "from_gregorian",
    "day_info",
    "month_info",
    "parse_date",
    "full_moon_weeks",
    "new_year_rows",
    "ContractViolation",
    "NelscError",
    "DayInfo",
    "FullMoonWeek",
    "NelscDate",
    "NewYearRow",
    "date_to_offset",
    "is_leap_year",
    "offset_to_date",
    "offset_to_ymd",
    "GREGORIAN_OFFSET",
    "NelscCycleEngine",
    "NelscCycleParams",
]
