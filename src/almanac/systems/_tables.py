from __future__ import annotations

from typing import Tuple

from ..core.errors import InvalidArgumentError

MONTHS_IN_YEAR = 12
DAYS_IN_WEEK = 7

# Common-year month lengths; February is patched for leap years.
MONTH_LENGTHS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

WEEKDAY_NAMES_EN: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)


def check_month(month: int, months_in_year: int = MONTHS_IN_YEAR) -> None:
    if not isinstance(month, int) or isinstance(month, bool):
        raise InvalidArgumentError(f"month must be an int, got {month!r}")
    if not (1 <= month <= months_in_year):
        raise InvalidArgumentError(f"month must be in 1..{months_in_year}, got {month}")


def month_length(month: int, leap: bool) -> int:
    """Standard 12-month table: 30 for Apr/Jun/Sep/Nov, 28/29 for Feb, else 31."""
    check_month(month)
    if month == 2:
        return 29 if leap else 28
    return MONTH_LENGTHS[month - 1]


def lookup(names: Tuple[str, ...], index: int, what: str) -> str:
    if not isinstance(index, int) or isinstance(index, bool) or not (0 <= index < len(names)):
        raise InvalidArgumentError(f"{what} out of range: {index!r}")
    return names[index]
