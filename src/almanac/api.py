from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from .attributes import compute_attributes
from .core import converter as _conv
from .core import time as _time
from .core.config import load_settings
from .core.date import CalendarDate
from .core.errors import InvalidArgumentError
from .core.registry import RulesRegistry
from .core.types import CalendarSystem, DayInfo, JulianDayNumber
from .systems.interfaces import CalendarRules

CalendarLike = Union[str, CalendarSystem, CalendarRules, None]

_registry: Optional[RulesRegistry] = None

def set_registry(reg: RulesRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> RulesRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def get_rules(calendar: CalendarLike = None) -> CalendarRules:
    """Resolve a calendar name (or the ALMANAC_CALENDAR default) to its rules."""
    if calendar is None:
        calendar = load_settings().calendar
    if isinstance(calendar, str):
        return _reg().get(calendar)
    return calendar

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: CalendarLike = None) -> Dict[str, Any]:
    r = get_rules(calendar)
    return {
        "name": r.name,
        "system": r.system.value,
        "days_in_week": r.days_in_week(),
        "months_in_year": r.months_in_year(),
        "month_names": [r.month_name(m) for m in range(1, r.months_in_year() + 1)],
        "weekday_names": [r.weekday_name(i) for i in range(r.days_in_week())],
    }

def register_rules(name: str, rules: CalendarRules, *, overwrite: bool = False) -> None:
    _reg().register(name, rules, overwrite=overwrite)

# ============================================================
# Dates and conversion
# ============================================================

def make_date(year: int, month: int, day: int, *, calendar: CalendarLike = None) -> CalendarDate:
    return CalendarDate(year, month, day, get_rules(calendar))

def to_julian_day(d: CalendarDate) -> JulianDayNumber:
    return _conv.to_julian_day_number(d)

def from_julian_day(jd: Union[JulianDayNumber, float], *, calendar: CalendarLike = None) -> CalendarDate:
    return CalendarDate.from_julian_day(jd, get_rules(calendar))

def convert(d: CalendarDate, calendar: CalendarLike) -> CalendarDate:
    return _conv.convert(d, get_rules(calendar))

def today(*, calendar: CalendarLike = None, clock: Optional[date] = None) -> CalendarDate:
    return _time.today(get_rules(calendar), clock=clock)

def is_leap_year(year: int, *, calendar: CalendarLike = None) -> bool:
    return get_rules(calendar).is_leap_year(year)

def days_in_month(month: int, year: int, *, calendar: CalendarLike = None) -> int:
    return get_rules(calendar).days_in_month(month, year)

# ============================================================
# Month grid and day info
# ============================================================

def month_calendar(year: int, month: int, *, calendar: CalendarLike = None) -> List[List[Optional[int]]]:
    """
    Weeks of a month as rows of day numbers, first weekday first
    (Sunday for the stock systems). Days outside the month are None.
    """
    rules = get_rules(calendar)
    first = CalendarDate(year, month, 1, rules)
    width = rules.days_in_week()
    cells: List[Optional[int]] = [None] * first.weekday_number()
    cells += list(range(1, first.days_in_month() + 1))
    cells += [None] * (-len(cells) % width)
    return [cells[i:i + width] for i in range(0, len(cells), width)]

def day_info(d: CalendarDate, *, attributes: Sequence[str] = ()) -> DayInfo:
    if isinstance(attributes, str):
        raise InvalidArgumentError("attributes must be a sequence of names, not a string")
    attrs = compute_attributes(d, attributes) if attributes else None
    return DayInfo(
        date=d.copy(),
        julian_day=d.julian_day(),
        weekday=d.weekday_number(),
        weekday_name=d.weekday_name(),
        attributes=attrs,
    )
