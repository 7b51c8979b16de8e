from __future__ import annotations

from typing import Any


class AlmanacError(Exception):
    """Base error."""


class InvalidArgumentError(AlmanacError, ValueError):
    """Raised when a structural parameter is outside its domain (e.g. month 13)."""


class InvalidDateError(AlmanacError, ValueError):
    """Raised when (year, month, day) does not name a real date under a calendar system."""

    def __init__(self, system: Any, year: int, month: int, day: int, reason: str = "") -> None:
        self.system = system
        self.year = year
        self.month = month
        self.day = day
        msg = f"{year}-{month!s:0>2}-{day!s:0>2} is not a valid date in the {system} calendar"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class UnknownCalendarError(AlmanacError, KeyError):
    """Raised when a calendar system name is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
