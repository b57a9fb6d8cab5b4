from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol

from .types import Date, Duration, Weekday

class Calendar(Protocol):
    min_epoch_day: int
    max_epoch_day: int

    def info(self) -> Dict[str, Any]: ...
    def from_epoch(self, days: int) -> Date: ...
    def to_epoch(self, date: Date) -> int: ...
    def add(self, date: Date, duration: Duration) -> Date: ...
    def weekday(self, date: Date) -> Weekday: ...

@dataclass
class CalendarRegistry:
    _calendars: Dict[str, Calendar]

    def get(self, name: str) -> Calendar:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: Calendar, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar
