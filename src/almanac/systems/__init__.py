"""Calendar system rules, one frozen object per ``CalendarSystem`` tag."""

from .factory import as_system, make_rules
from .gregorian import GregorianRules
from .interfaces import CalendarRules
from .julian import JulianRules

__all__ = [
    "CalendarRules",
    "GregorianRules",
    "JulianRules",
    "as_system",
    "make_rules",
]
