from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .errors import InvalidArgumentError


class CalendarSystem(str, Enum):
    """Tag selecting one calendar system's rules."""
    JULIAN = "julian"
    GREGORIAN = "gregorian"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class JulianDayNumber:
    """
    Point on the continuous Julian Day timeline.

    Days are counted from noon: integral values fall at noon, ``x.5`` at the
    midnight that starts a civil day. Any finite float is accepted.
    """
    value: float

    def __post_init__(self) -> None:
        value = float(self.value)
        if not math.isfinite(value):
            raise InvalidArgumentError(f"Julian Day must be finite, got {value!r}")
        object.__setattr__(self, "value", value)

    @property
    def jdn(self) -> int:
        """Integer number of the civil day containing this instant."""
        return int(math.floor(self.value + 0.5))

    @classmethod
    def from_jdn(cls, jdn: int) -> "JulianDayNumber":
        """Midnight at the start of civil day ``jdn``."""
        return cls(float(jdn) - 0.5)

    def shift(self, days: float) -> "JulianDayNumber":
        return JulianDayNumber(self.value + days)

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True)
class DayInfo:
    date: Any  # CalendarDate
    julian_day: JulianDayNumber
    weekday: int
    weekday_name: str
    attributes: Optional[Dict[str, Any]] = None
