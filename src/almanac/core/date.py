"""
almanac.core.date
-----------------
CalendarDate: a (year, month, day) cursor in one calendar system.

The cursor is mutable: ``next_day``, ``prev_day``, ``add_days`` and
``subtract_days`` move it in place and return it, so calls chain. Everything
that needs the Julian Day goes through ``almanac.core.converter``.
"""

from __future__ import annotations

import math
from typing import Any, Iterable

from . import converter as _conv
from .errors import InvalidArgumentError
from .types import CalendarSystem, JulianDayNumber
from ..systems.interfaces import CalendarRules


def _check_count(n: Any) -> int:
    if not isinstance(n, int) or isinstance(n, bool):
        raise InvalidArgumentError(f"day count must be an int, got {n!r}")
    return n


class CalendarDate:
    """
    A whole civil day in one calendar system.

    Years are proleptic and astronomical: year 0 is 1 BC, year -1 is 2 BC.
    Construction validates the triple and raises InvalidDateError.
    """

    __slots__ = ("_year", "_month", "_day", "_rules")
    __hash__ = None  # mutable

    def __init__(self, year: int, month: int, day: int, rules: _conv.RulesLike) -> None:
        r = _conv.resolve_rules(rules)
        _conv.validate(r, year, month, day)
        self._rules = r
        self._year = year
        self._month = month
        self._day = day

    # ---------------------------------------------------------
    # Alternate constructors
    # ---------------------------------------------------------

    @classmethod
    def julian(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(year, month, day, CalendarSystem.JULIAN)

    @classmethod
    def gregorian(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(year, month, day, CalendarSystem.GREGORIAN)

    @classmethod
    def from_date(cls, other: "CalendarDate", rules: _conv.RulesLike | None = None) -> "CalendarDate":
        """Copy ``other``, converting it when ``rules`` names a different system."""
        if rules is None:
            return other.copy()
        return _conv.convert(other, rules)

    @classmethod
    def from_julian_day(cls, jd: JulianDayNumber | float, rules: _conv.RulesLike) -> "CalendarDate":
        if not isinstance(jd, JulianDayNumber):
            jd = JulianDayNumber(jd)
        return _conv.to_calendar_date(jd, rules)

    def copy(self) -> "CalendarDate":
        return CalendarDate(self._year, self._month, self._day, self._rules)

    # ---------------------------------------------------------
    # Read-only accessors
    # ---------------------------------------------------------

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def rules(self) -> CalendarRules:
        return self._rules

    @property
    def system(self) -> CalendarSystem:
        return self._rules.system

    def ymd(self) -> tuple[int, int, int]:
        return self._year, self._month, self._day

    def is_leap_year(self) -> bool:
        return self._rules.is_leap_year(self._year)

    def days_in_month(self) -> int:
        return self._rules.days_in_month(self._month, self._year)

    def month_name(self) -> str:
        return self._rules.month_name(self._month)

    def julian_day(self) -> JulianDayNumber:
        return _conv.to_julian_day_number(self)

    def weekday_number(self) -> int:
        """0 for Sunday through days_in_week() - 1."""
        jd = self.julian_day()
        return math.floor(jd.value + 1.5) % self._rules.days_in_week()

    def weekday_name(self) -> str:
        return self._rules.weekday_name(self.weekday_number())

    def to(self, rules: _conv.RulesLike) -> "CalendarDate":
        """This day expressed in another calendar system (a new object)."""
        return _conv.convert(self, rules)

    # ---------------------------------------------------------
    # Stepping
    # ---------------------------------------------------------

    def next_day(self) -> "CalendarDate":
        if self._day == self._rules.days_in_month(self._month, self._year):
            if self._month == self._rules.months_in_year():
                self._month = 1
                self._year += 1
            else:
                self._month += 1
            self._day = 1
        else:
            self._day += 1
        return self

    def prev_day(self) -> "CalendarDate":
        if self._day == 1:
            if self._month == 1:
                self._month = self._rules.months_in_year()
                self._year -= 1
            else:
                self._month -= 1
            # length of the month we just moved into
            self._day = self._rules.days_in_month(self._month, self._year)
        else:
            self._day -= 1
        return self

    def add_days(self, n: int) -> "CalendarDate":
        """Move ``n`` days forward; same result as ``n`` calls to next_day()."""
        n = _check_count(n)
        if n:
            jd = self.julian_day().jdn + n
            self._year, self._month, self._day = _conv.civil_from_day_number(self.system, jd)
        return self

    def subtract_days(self, n: int) -> "CalendarDate":
        """Move ``n`` days back; same result as ``n`` calls to prev_day()."""
        return self.add_days(-_check_count(n))

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def is_before(self, other: "CalendarDate") -> bool:
        return self.julian_day() < other.julian_day()

    def is_after(self, other: "CalendarDate") -> bool:
        return self.julian_day() > other.julian_day()

    def days_until(self, other: "CalendarDate") -> int:
        """Signed whole days from this date to ``other`` (any system)."""
        return other.julian_day().jdn - self.julian_day().jdn

    @staticmethod
    def dates_are_chronological(*dates: "CalendarDate") -> bool:
        return dates_are_chronological(*dates)

    @staticmethod
    def dates_are_reverse_chronological(*dates: "CalendarDate") -> bool:
        return dates_are_reverse_chronological(*dates)

    # ---------------------------------------------------------
    # Formatting hooks
    # ---------------------------------------------------------

    def get_date(self, pattern: str = "M-dd-yyyy") -> str:
        from ..format import format_date
        return format_date(self, pattern)

    def __str__(self) -> str:
        return f"{self._rules.name}: {self.month_name()} {self._day}, {self._year}"

    def __repr__(self) -> str:
        return f"CalendarDate({self._year}, {self._month}, {self._day}, {self.system.value!r})"

    # ---------------------------------------------------------
    # Python protocol
    # ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.system == other.system and self.ymd() == other.ymd()

    # Ordering is chronological and works across systems.
    def __lt__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.julian_day() < other.julian_day()

    def __le__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.julian_day() <= other.julian_day()

    def __gt__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.julian_day() > other.julian_day()

    def __ge__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.julian_day() >= other.julian_day()

    def __add__(self, n: int) -> "CalendarDate":
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return self.copy().add_days(n)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, CalendarDate):
            return other.days_until(self)
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.copy().subtract_days(other)


def _julian_days(dates: Iterable[CalendarDate]) -> list[float]:
    values = [d.julian_day().value for d in dates]
    if not values:
        raise InvalidArgumentError("at least one date is required")
    return values


def dates_are_chronological(*dates: CalendarDate) -> bool:
    """True when the Julian Days of ``dates`` never decrease."""
    values = _julian_days(dates)
    return all(a <= b for a, b in zip(values, values[1:]))


def dates_are_reverse_chronological(*dates: CalendarDate) -> bool:
    """True when the Julian Days of ``dates`` never increase."""
    values = _julian_days(dates)
    return all(a >= b for a, b in zip(values, values[1:]))
