"""
almanac.systems.factory
-----------------------
Resolves a calendar system tag to its rules object.
"""

from __future__ import annotations

from typing import Dict, Union

from ..core.errors import UnknownCalendarError
from ..core.types import CalendarSystem
from .gregorian import GregorianRules
from .interfaces import CalendarRules
from .julian import JulianRules

SystemLike = Union[CalendarSystem, str]

_BUILTIN: Dict[CalendarSystem, CalendarRules] = {
    CalendarSystem.JULIAN: JulianRules(),
    CalendarSystem.GREGORIAN: GregorianRules(),
}


def as_system(system: SystemLike) -> CalendarSystem:
    if isinstance(system, CalendarSystem):
        return system
    try:
        return CalendarSystem(str(system).strip().lower())
    except ValueError:
        raise UnknownCalendarError(
            f"Unknown calendar system '{system}'. Available: {sorted(s.value for s in CalendarSystem)}"
        ) from None


def make_rules(system: SystemLike) -> CalendarRules:
    """The stock rules object for ``system``."""
    return _BUILTIN[as_system(system)]
