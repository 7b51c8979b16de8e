from __future__ import annotations
from almanac.core.registry import RulesRegistry
from almanac.core.types import CalendarSystem
from almanac.systems.factory import make_rules

def build_registry() -> RulesRegistry:
    rules = {}
    for system in CalendarSystem:
        rules[system.value] = make_rules(system)
    return RulesRegistry(rules)
