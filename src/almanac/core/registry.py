from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from .errors import UnknownCalendarError
from ..systems.interfaces import CalendarRules

log = logging.getLogger(__name__)


@dataclass
class RulesRegistry:
    _rules: Dict[str, CalendarRules]

    def get(self, name: str) -> CalendarRules:
        key = name.strip().lower()
        if key not in self._rules:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._rules)}")
        return self._rules[key]

    def list(self) -> List[str]:
        return sorted(self._rules.keys())

    def register(self, name: str, rules: CalendarRules, *, overwrite: bool = False) -> None:
        key = name.strip().lower()
        if (not overwrite) and (key in self._rules):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        log.debug("registering calendar %r (%s)", key, rules.system)
        self._rules[key] = rules
