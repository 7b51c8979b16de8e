from __future__ import annotations
from typing import Any, Dict

from ..core.date import CalendarDate
from ..core.types import CalendarSystem
from .registry import register_attribute

def day_of_year(d: CalendarDate) -> Dict[str, Any]:
    first = CalendarDate(d.year, 1, 1, d.rules)
    return {"day_of_year": first.days_until(d) + 1}

def leap_year(d: CalendarDate) -> Dict[str, Any]:
    return {"leap_year": d.is_leap_year(), "days_in_year": d.rules.days_in_year(d.year)}

def month(d: CalendarDate) -> Dict[str, Any]:
    return {"month_name": d.month_name(), "days_in_month": d.days_in_month()}

def equivalents(d: CalendarDate) -> Dict[str, Any]:
    # Same day in every built-in system.
    return {"equivalents": {s.value: d.to(s).ymd() for s in CalendarSystem}}

register_attribute("day_of_year", day_of_year)
register_attribute("leap_year", leap_year)
register_attribute("month", month)
register_attribute("equivalents", equivalents)
