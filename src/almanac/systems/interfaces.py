"""
almanac.systems.interfaces
--------------------------
The capability set every calendar system provides. The set of systems is
closed: one rules object per ``CalendarSystem`` tag, looked up through the
registry rather than subclassed by callers.

Months are 1-based, weekday numbers are 0-based with 0 = Sunday.
"""

from __future__ import annotations

from typing import Protocol, Tuple

from ..core.types import CalendarSystem


class CalendarRules(Protocol):
    """Fixed structural facts of one calendar system."""

    @property
    def system(self) -> CalendarSystem:
        """Tag of the calendar system these rules describe."""
        ...

    @property
    def name(self) -> str:
        """Human readable name, e.g. 'Julian Calendar'."""
        ...

    def days_in_week(self) -> int:
        ...

    def months_in_year(self) -> int:
        ...

    def is_leap_year(self, year: int) -> bool:
        ...

    def days_in_month(self, month: int, year: int) -> int:
        """
        Length of ``month`` in ``year``.
        Raises InvalidArgumentError when month is outside [1, months_in_year()].
        """
        ...

    def days_in_year(self, year: int) -> int:
        ...

    def days_per_month_in_year(self, year: int) -> Tuple[int, ...]:
        ...

    def month_name(self, month: int) -> str:
        ...

    def weekday_name(self, number: int) -> str:
        ...
