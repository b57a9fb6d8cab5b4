from __future__ import annotations
from eatcal.core.engine import CalendarRegistry
from eatcal.engines.specs import ALL_SPECS
from eatcal.engines.factory import make_calendar

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, spec in ALL_SPECS.items():
        calendars[name] = make_calendar(spec)
    return CalendarRegistry(calendars)
