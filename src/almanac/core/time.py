from __future__ import annotations

from datetime import date
from typing import Optional

from .converter import RulesLike, civil_from_day_number, day_number, to_calendar_date
from .date import CalendarDate
from .types import CalendarSystem, JulianDayNumber


def from_python_date(d: date) -> JulianDayNumber:
    """datetime.date (proleptic Gregorian) -> Julian Day at its midnight."""
    return JulianDayNumber.from_jdn(day_number(CalendarSystem.GREGORIAN, d.year, d.month, d.day))


def to_python_date(jd: JulianDayNumber) -> date:
    """Inverse of from_python_date; only years 1..9999 fit in datetime.date."""
    y, m, d = civil_from_day_number(CalendarSystem.GREGORIAN, jd.jdn)
    return date(y, m, d)


def from_civil(d: date, rules: RulesLike) -> CalendarDate:
    return to_calendar_date(from_python_date(d), rules)


def today(rules: RulesLike = CalendarSystem.GREGORIAN, *, clock: Optional[date] = None) -> CalendarDate:
    """Today's host date expressed in ``rules``'s calendar system."""
    d = clock if clock is not None else date.today()
    return from_civil(d, rules)
