"""almanac public API.

Calendar dates in the proleptic Julian and Gregorian calendars, with day
arithmetic and conversion through the Julian Day Number.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    get_rules,
    list_calendars,
    calendar_info,
    register_rules,
    make_date,
    to_julian_day,
    from_julian_day,
    convert,
    today,
    is_leap_year,
    days_in_month,
    month_calendar,
    day_info,
)
from .core.date import CalendarDate, dates_are_chronological, dates_are_reverse_chronological
from .core.errors import AlmanacError, InvalidArgumentError, InvalidDateError, UnknownCalendarError
from .core.types import CalendarSystem, DayInfo, JulianDayNumber
from .format import format_date
from .systems import CalendarRules, GregorianRules, JulianRules

# Julian 1582-10-05 == Gregorian 1582-10-15
GREGORIAN_REFORM = JulianDayNumber(2299160.5)

__all__ = [
    "get_rules",
    "list_calendars",
    "calendar_info",
    "register_rules",
    "make_date",
    "to_julian_day",
    "from_julian_day",
    "convert",
    "today",
    "is_leap_year",
    "days_in_month",
    "month_calendar",
    "day_info",
    "CalendarDate",
    "dates_are_chronological",
    "dates_are_reverse_chronological",
    "AlmanacError",
    "InvalidArgumentError",
    "InvalidDateError",
    "UnknownCalendarError",
    "CalendarSystem",
    "DayInfo",
    "JulianDayNumber",
    "format_date",
    "CalendarRules",
    "GregorianRules",
    "JulianRules",
    "GREGORIAN_REFORM",
]
