"""
almanac.systems.gregorian
-------------------------
Proleptic Gregorian calendar: leap years are divisible by 4, except century
years not divisible by 400.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.types import CalendarSystem
from ._tables import DAYS_IN_WEEK, MONTHS_IN_YEAR, WEEKDAY_NAMES_EN, check_month, lookup, month_length

GREGORIAN_MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True)
class GregorianRules:
    system: CalendarSystem = CalendarSystem.GREGORIAN
    name: str = "Gregorian Calendar"
    month_names: Tuple[str, ...] = GREGORIAN_MONTH_NAMES
    weekday_names: Tuple[str, ...] = WEEKDAY_NAMES_EN

    def __post_init__(self) -> None:
        if len(self.month_names) != MONTHS_IN_YEAR:
            raise ValueError(f"need {MONTHS_IN_YEAR} month names")
        if len(self.weekday_names) != DAYS_IN_WEEK:
            raise ValueError(f"need {DAYS_IN_WEEK} weekday names")

    def days_in_week(self) -> int:
        return DAYS_IN_WEEK

    def months_in_year(self) -> int:
        return MONTHS_IN_YEAR

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def days_in_month(self, month: int, year: int) -> int:
        return month_length(month, self.is_leap_year(year))

    def days_in_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    def days_per_month_in_year(self, year: int) -> Tuple[int, ...]:
        leap = self.is_leap_year(year)
        return tuple(month_length(m, leap) for m in range(1, MONTHS_IN_YEAR + 1))

    def month_name(self, month: int) -> str:
        check_month(month)
        return self.month_names[month - 1]

    def weekday_name(self, number: int) -> str:
        return lookup(self.weekday_names, number, "weekday number")
