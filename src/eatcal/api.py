from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from .core.engine import Calendar, CalendarRegistry
from .core.types import CalendarSpec, Date, Duration, Month, Weekday
from .engines.factory import make_calendar as _make_calendar
from .engines.specs import DEFAULT_CALENDAR

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(name: str = DEFAULT_CALENDAR) -> Calendar:
    return _reg().get(name)

def make_calendar(spec: CalendarSpec) -> Calendar:
    return _make_calendar(spec)

def register_calendar(name: str, calendar: Calendar, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

# ============================================================
# Conversions against a named calendar
# ============================================================

def from_epoch(days: int, *, calendar: str = DEFAULT_CALENDAR) -> Date:
    return _reg().get(calendar).from_epoch(days)

def to_epoch(date: Date, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _reg().get(calendar).to_epoch(date)

def add(date: Date, duration: Duration, *, calendar: str = DEFAULT_CALENDAR) -> Date:
    return _reg().get(calendar).add(date, duration)

def weekday(date: Date, *, calendar: str = DEFAULT_CALENDAR) -> Weekday:
    return _reg().get(calendar).weekday(date)

def epoch_bounds(calendar: str = DEFAULT_CALENDAR) -> tuple[int, int]:
    """Inclusive (min_epoch_day, max_epoch_day)."""
    cal = _reg().get(calendar)
    return cal.min_epoch_day, cal.max_epoch_day

def date(year: int, month: Union[Month, int], day: int) -> Date:
    return Date.init(year, month, day)
