"""
almanac.core.converter
----------------------
The only place where calendar dates are translated to and from the Julian Day
timeline. Converting between two calendar systems always goes through a
JulianDayNumber; there are no system-to-system formulas.

Day counts use the Fliegel-Van Flandern arrangement: the year is shifted to
start in March so that February (the only month of variable length) comes
last, whole years contribute 365 days plus their leap days, and
``(153 * m + 2) // 5`` counts the days of the whole months elapsed since
March. Python floor division keeps every formula exact for year 0 and for
negative years.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple, Union, TYPE_CHECKING

from .errors import InvalidDateError
from .types import CalendarSystem, JulianDayNumber
from ..systems.factory import SystemLike, as_system, make_rules
from ..systems.interfaces import CalendarRules

if TYPE_CHECKING:
    from .date import CalendarDate

RulesLike = Union[CalendarRules, CalendarSystem, str]

YMD = Tuple[int, int, int]


# ============================================================
# Per-system day counts (integer JDN, noon-aligned)
# ============================================================

def _julian_to_jdn(y: int, m: int, d: int) -> int:
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return d + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083


def _jdn_to_julian(jdn: int) -> YMD:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day


def _gregorian_to_jdn(y: int, m: int, d: int) -> int:
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return d + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def _jdn_to_gregorian(jdn: int) -> YMD:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


_FORWARD: Dict[CalendarSystem, Callable[[int, int, int], int]] = {
    CalendarSystem.JULIAN: _julian_to_jdn,
    CalendarSystem.GREGORIAN: _gregorian_to_jdn,
}

_INVERSE: Dict[CalendarSystem, Callable[[int], YMD]] = {
    CalendarSystem.JULIAN: _jdn_to_julian,
    CalendarSystem.GREGORIAN: _jdn_to_gregorian,
}


# ============================================================
# Validation
# ============================================================

def resolve_rules(rules: RulesLike) -> CalendarRules:
    """Accept a rules object, a CalendarSystem tag or a system name."""
    if isinstance(rules, (CalendarSystem, str)):
        return make_rules(rules)
    return rules


def validate(rules: CalendarRules, year: int, month: int, day: int) -> None:
    """Raise InvalidDateError unless (year, month, day) is a real date under ``rules``."""
    for v in (year, month, day):
        if not isinstance(v, int) or isinstance(v, bool):
            raise InvalidDateError(rules.system, year, month, day, "fields must be integers")
    if not (1 <= month <= rules.months_in_year()):
        raise InvalidDateError(rules.system, year, month, day, f"month must be in 1..{rules.months_in_year()}")
    dim = rules.days_in_month(month, year)
    if not (1 <= day <= dim):
        raise InvalidDateError(rules.system, year, month, day, f"day must be in 1..{dim}")


# ============================================================
# Integer day numbers
# ============================================================

def day_number(rules: RulesLike, year: int, month: int, day: int) -> int:
    """Integer Julian Day Number (noon) of a validated civil date."""
    r = resolve_rules(rules)
    validate(r, year, month, day)
    return _FORWARD[r.system](year, month, day)


def civil_from_day_number(system: SystemLike, jdn: int) -> YMD:
    """(year, month, day) of integer day ``jdn`` in ``system``."""
    return _INVERSE[as_system(system)](int(jdn))


# ============================================================
# Public conversions
# ============================================================

def to_julian_day_number(date: "CalendarDate") -> JulianDayNumber:
    """Julian Day at the midnight that starts ``date``."""
    return JulianDayNumber.from_jdn(day_number(date.rules, date.year, date.month, date.day))


def to_calendar_date(jd: JulianDayNumber, target: RulesLike) -> "CalendarDate":
    """The civil date, in ``target``'s system, of the day containing ``jd``."""
    from .date import CalendarDate

    rules = resolve_rules(target)
    y, m, d = civil_from_day_number(rules.system, jd.jdn)
    return CalendarDate(y, m, d, rules)


def convert(date: "CalendarDate", target: RulesLike) -> "CalendarDate":
    """Re-express ``date`` in another calendar system via its Julian Day."""
    return to_calendar_date(to_julian_day_number(date), target)
